"""Static splitter profile loader. Read-only; no business logic."""

import json
from pathlib import Path

from splitter_service.config.settings import get_settings
from splitter_service.config.splitting.models import SplitterProfile

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, SplitterProfile] | None = None
_active_profile: str | None = None


def _load_raw_data() -> dict:
    """Load raw JSON; used to read both profiles and active."""
    raw = _config_path.read_text(encoding="utf-8")
    return json.loads(raw)


def load_splitter_profiles() -> dict[str, SplitterProfile]:
    """Load splitter profiles from static.json. Keys are profile names."""
    global _cached
    if _cached is not None:
        return _cached
    data = _load_raw_data()
    profiles = data.get("profiles", {})
    _cached = {k: SplitterProfile.model_validate(v) for k, v in profiles.items()}
    return _cached


def get_splitter_profile(profile_name: str) -> SplitterProfile | None:
    """Return the splitter profile with the given name, or None if missing."""
    return load_splitter_profiles().get(profile_name)


def get_active_profile_name() -> str:
    """
    Return the active profile name: settings.default_profile when set, else the one
    marked as active in static.json. Defaults to 'default' if neither is set.
    """
    global _active_profile
    configured = get_settings().default_profile
    if configured:
        return configured
    if _active_profile is not None:
        return _active_profile
    data = _load_raw_data()
    _active_profile = data.get("active", "default")
    return _active_profile


def get_active_splitter_profile() -> SplitterProfile:
    """Return the splitter profile for the active profile name."""
    name = get_active_profile_name()
    profile = get_splitter_profile(name)
    if profile is None:
        raise ValueError(f"Active profile {name!r} not found in profiles")
    return profile


def resolve_splitter_profile(profile_name: str = "active", inline_config: dict | None = None) -> SplitterProfile:
    """
    Resolve a splitter profile by name, optionally overridden by inline fields.
    "active" resolves to get_active_profile_name(). Inline fields are laid over the named
    profile and the result is validated again. Raises ValueError for unknown profiles;
    pydantic ValidationError (a ValueError) for invalid fields.
    """
    if profile_name == "active":
        profile_name = get_active_profile_name()
    base = get_splitter_profile(profile_name)
    if base is None:
        raise ValueError(f"Unknown splitter profile: {profile_name!r}")
    if not inline_config:
        return base
    return SplitterProfile.model_validate({**base.model_dump(), **inline_config})
