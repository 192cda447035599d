"""GET /profiles: list splitter profile names and the active one."""

from fastapi import APIRouter

from splitter_service.config.splitting.static import get_active_profile_name, load_splitter_profiles
from splitter_service.controllers.schema.split import ProfilesResponse

router = APIRouter(prefix="/profiles", tags=["splitting"])


@router.get("", response_model=ProfilesResponse)
def list_profiles() -> ProfilesResponse:
    return ProfilesResponse(
        active=get_active_profile_name(),
        profiles=sorted(load_splitter_profiles()),
    )
