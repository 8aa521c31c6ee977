from fastapi import APIRouter

from cryptograms.models.schemas import VersionResponse

API_VERSION = "0.1"

router = APIRouter()


@router.get("", response_model=VersionResponse, summary="API version")
async def get_version() -> VersionResponse:
    """The api version."""
    return VersionResponse(api_version=API_VERSION)
