import pytest

from splitter_service.services.splitting import length
from splitter_service.services.splitting.length import count_chars, count_tokens, get_length_fn
from splitter_service.utils.ids import generate_chunk_id, get_id_generator, indexed_id, inherit_id


class _FakeEncoding:
    def encode(self, text: str) -> list[int]:
        return [ord(c) for c in text.split()[0]] if text.split() else []


@pytest.mark.unit
def test_count_chars_counts_code_points():
    assert count_chars("héllo") == 5
    assert count_chars("") == 0


@pytest.mark.unit
def test_count_tokens_uses_encoding(monkeypatch):
    monkeypatch.setattr(length, "_get_tiktoken_encoding", lambda name=length.DEFAULT_ENCODING: _FakeEncoding())

    assert count_tokens("abc def") == 3


@pytest.mark.unit
def test_count_tokens_falls_back_to_estimate(monkeypatch):
    monkeypatch.setattr(length, "_get_tiktoken_encoding", lambda name=length.DEFAULT_ENCODING: None)

    assert count_tokens("a" * 40) == 10
    assert count_tokens("ab") == 1
    assert count_tokens("") == 0


@pytest.mark.unit
def test_get_length_fn():
    assert get_length_fn("chars") is count_chars
    assert get_length_fn("tiktoken") is count_tokens
    with pytest.raises(ValueError, match="Unknown length function"):
        get_length_fn("bytes")


@pytest.mark.unit
def test_id_strategies():
    assert inherit_id("doc", 3) == "doc"
    assert indexed_id("doc", 3) == "doc_part3"
    assert get_id_generator("indexed") is indexed_id
    with pytest.raises(ValueError, match="Unknown id strategy"):
        get_id_generator("random")


@pytest.mark.unit
def test_hashed_ids_are_stable_and_distinct():
    first = generate_chunk_id("doc", 0)

    assert first == generate_chunk_id("doc", 0)
    assert first != generate_chunk_id("doc", 1)
    assert first != generate_chunk_id("other", 0)
    assert first.startswith("chunk_")
    assert len(first) == len("chunk_") + 24


@pytest.mark.unit
def test_failed_encoding_does_not_disable_other_encodings(monkeypatch):
    import tiktoken

    def get_encoding(name):
        if name == "no_such_encoding":
            raise ValueError(f"Unknown encoding {name}")
        return _FakeEncoding()

    monkeypatch.setattr(tiktoken, "get_encoding", get_encoding)
    monkeypatch.setattr(length, "_tiktoken_encodings", {})
    monkeypatch.setattr(length, "_tiktoken_failed", set())

    assert count_tokens("a" * 40, "no_such_encoding") == 10
    assert count_tokens("abc def") == 3
    assert length._tiktoken_failed == {"no_such_encoding"}
