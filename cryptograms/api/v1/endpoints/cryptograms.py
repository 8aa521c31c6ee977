from fastapi import APIRouter, HTTPException, status

from cryptograms.core.exceptions import (
    CipherKeyError,
    CryptogramNotFoundError,
    EmptyCorpusError,
    EngineNotFoundError,
    ExhaustedSearchError,
)
from cryptograms.dependencies import CryptogramServiceDep, SettingsDep
from cryptograms.models.schemas import (
    AnswerResponse,
    CryptogramRequest,
    CryptogramResponse,
    ErrorResponse,
)

router = APIRouter()


@router.post(
    "",
    response_model=CryptogramResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or key"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
        503: {"model": ErrorResponse, "description": "No quote or puzzle available"},
    },
    summary="Create a cryptogram",
    description=(
        "Encrypt the given plaintext, or a random quote of the requested length, "
        "with the chosen cipher. The returned token retrieves the answer."
    ),
)
async def create_cryptogram(
    request: CryptogramRequest,
    service: CryptogramServiceDep,
    settings: SettingsDep,
) -> CryptogramResponse:
    """
    Create a new cryptogram.

    When no plaintext is given a quote is picked from the quote corpus.
    """
    # Validate plaintext length
    if request.plaintext is not None and len(request.plaintext) > settings.max_plaintext_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Plaintext exceeds maximum length of {settings.max_plaintext_length}",
        )

    try:
        return await service.create(
            plaintext=request.plaintext,
            length=request.length,
            cipher_type=request.cipher_type,
            key=request.key,
        )

    except CipherKeyError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except EngineNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    except (EmptyCorpusError, ExhaustedSearchError) as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=e.message,
        )


@router.get(
    "/{token}/answer",
    response_model=AnswerResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Unknown token"},
    },
    summary="Get the answer to a cryptogram",
)
async def get_answer(token: str, service: CryptogramServiceDep) -> AnswerResponse:
    """Return the plaintext and key stored for a cryptogram token."""
    try:
        return await service.answer(token)
    except CryptogramNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
