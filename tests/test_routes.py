import pytest

from splitter_service.config.settings import get_settings

SCENARIO = {
    "profile": "characters",
    "chunk_size": 5,
    "overlap_size": 2,
    "separators": ["a", "b", "c"],
    "keep_type": "start",
    "documents": [{"content": "1a23a45a67890c1a234b5678a90"}],
}


@pytest.mark.integration
def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.integration
def test_profiles(client):
    response = client.get("/profiles")

    assert response.status_code == 200
    body = response.json()
    assert body["active"] == "default"
    assert "markdown" in body["profiles"]
    assert body["profiles"] == sorted(body["profiles"])


@pytest.mark.integration
def test_split_with_overrides(client):
    response = client.post("/split", json=SCENARIO)

    assert response.status_code == 200
    body = response.json()
    assert body["profile"] == "characters"
    assert body["documents_split"] == 1
    assert body["total_chunks"] == 7
    assert [c["content"] for c in body["chunks"]] == ["1a23", "a45", "a67890", "c1", "a234", "b5678", "a90"]
    assert [c["id"] for c in body["chunks"]] == [f"_part{i}" for i in range(7)]


@pytest.mark.integration
def test_split_uses_active_profile(client):
    response = client.post("/split", json={"documents": [{"id": "a", "content": "short text"}]})

    assert response.status_code == 200
    body = response.json()
    assert body["profile"] == "default"
    assert body["chunks"] == [{"id": "a", "content": "short text", "metadata": {}}]


@pytest.mark.integration
def test_split_keeps_document_order(client):
    payload = {
        "profile": "characters",
        "chunk_size": 3,
        "overlap_size": 0,
        "documents": [
            {"id": "first", "content": "abcdef", "metadata": {"n": 1}},
            {"id": "second", "content": "ghi", "metadata": {"n": 2}},
        ],
    }

    response = client.post("/split", json=payload)

    assert response.status_code == 200
    chunks = response.json()["chunks"]
    assert [(c["id"], c["content"], c["metadata"]["n"]) for c in chunks] == [
        ("first_part0", "abc", 1),
        ("first_part1", "def", 1),
        ("second_part0", "ghi", 2),
    ]


@pytest.mark.integration
def test_split_unknown_profile(client):
    response = client.post("/split", json={"profile": "nope", "documents": [{"content": "x"}]})

    assert response.status_code == 422
    assert "Unknown splitter profile" in response.json()["detail"]


@pytest.mark.integration
def test_split_invalid_overlap(client):
    response = client.post(
        "/split",
        json={"chunk_size": 5, "overlap_size": 5, "documents": [{"content": "x"}]},
    )

    assert response.status_code == 422
    assert response.json()["field"] == "overlap_size"


@pytest.mark.integration
def test_split_requires_documents(client):
    response = client.post("/split", json={"documents": []})

    assert response.status_code == 422


@pytest.mark.integration
def test_split_document_limit(client, monkeypatch):
    monkeypatch.setenv("MAX_DOCUMENTS_PER_REQUEST", "1")
    get_settings.cache_clear()

    response = client.post("/split", json={"documents": [{"content": "a"}, {"content": "b"}]})

    assert response.status_code == 422
    assert "At most 1 documents" in response.json()["detail"]
