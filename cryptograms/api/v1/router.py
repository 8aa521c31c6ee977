from fastapi import APIRouter

from cryptograms.api.v1.endpoints import cryptograms, version

api_router = APIRouter()

api_router.include_router(
    cryptograms.router,
    prefix="/cryptograms",
    tags=["Cryptograms"],
)

api_router.include_router(
    version.router,
    prefix="/version",
    tags=["Meta"],
)
