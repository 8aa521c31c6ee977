from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    NONE = "none"
    SUBSTITUTION = "substitution"
    POLYGRAPHIC = "polygraphic"
    FRACTIONATION = "fractionation"
    POLYALPHABETIC = "polyalphabetic"
    ARITHMETIC = "arithmetic"


class CipherType(str, Enum):
    """Specific cipher types."""

    IDENTITY = "identity"
    ROT13 = "rot13"
    CAESAR = "caesar"
    ARISTOCRAT = "aristocrat"
    PATRISTOCRAT = "patristocrat"
    PATRISTOCRAT_K1 = "patristocrat_k1"
    PATRISTOCRAT_K2 = "patristocrat_k2"
    HILL = "hill"
    MORBIT = "morbit"
    POLLUX = "pollux"
    PORTA = "porta"
    CRYPTARITHM = "cryptarithm"


class Length(str, Enum):
    """
    Length bucket of a quotation, in bytes.

    Ranges are start inclusive and end exclusive.
    """

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"

    @property
    def bounds(self) -> tuple[int, int]:
        start = {"short": 60, "medium": 90, "long": 120}[self.value]
        return start, start + 30


# ============================================================================
# Cipher Schemas
# ============================================================================


class CipherRequest(BaseModel):
    """A single encryption request handed to the dispatcher."""

    model_config = ConfigDict(frozen=True)

    plaintext: str
    cipher_type: CipherType = CipherType.IDENTITY
    key: str | None = None


class CipherResult(BaseModel):
    """Ciphertext plus the key actually used, if the cipher has one."""

    model_config = ConfigDict(frozen=True)

    ciphertext: str
    key: str | None = None


# ============================================================================
# Request Schemas
# ============================================================================


class CryptogramRequest(BaseModel):
    """Request schema for POST /cryptograms."""

    plaintext: str | None = Field(default=None, min_length=1)
    length: Length = Length.MEDIUM
    cipher_type: CipherType = CipherType.IDENTITY
    key: str | None = None


# ============================================================================
# Response Schemas
# ============================================================================


class CryptogramResponse(BaseModel):
    """Response schema for POST /cryptograms."""

    model_config = ConfigDict(from_attributes=True)

    ciphertext: str
    cipher_type: CipherType
    length: Length
    author: str | None = None
    token: str


class AnswerResponse(BaseModel):
    """Response schema for GET /cryptograms/{token}/answer."""

    model_config = ConfigDict(from_attributes=True)

    plaintext: str
    key: str | None = None


class VersionResponse(BaseModel):
    """Response schema for GET /version."""

    api_version: str


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str
