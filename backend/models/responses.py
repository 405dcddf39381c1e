from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel

from models.schemas.candidate_fields import CandidateFields

if TYPE_CHECKING:
    from services.errors import ExtractionError


ExtractionMethod = Literal["resume", "linkedin"]


class ExtractionResult(BaseModel):
    """Tagged outcome of one extraction call.

    Either ``success`` with ``data``, or a failure carrying a user-facing
    ``error`` message and a stable ``error_code``.
    """
    success: bool
    data: CandidateFields | None = None
    error: str | None = None
    error_code: str | None = None
    confidence_score: int | None = None
    extraction_method: ExtractionMethod | None = None
    raw_content: str | None = None

    @classmethod
    def failure(cls, exc: "ExtractionError") -> "ExtractionResult":
        return cls(success=False, error=exc.message, error_code=exc.code)


class LinkedInUrlCheck(BaseModel):
    valid: bool
    normalized_url: str | None = None


class ConfidenceResponse(BaseModel):
    confidence_score: int
