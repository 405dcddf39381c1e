from pydantic import BaseModel, Field

from models.schemas.candidate_fields import CandidateFields, ConfidenceScore


class LinkedInExtractRequest(BaseModel):
    url: str = Field(..., max_length=500, description="Public LinkedIn profile URL")


class EnhanceRequest(BaseModel):
    data: CandidateFields
    raw_content: str = Field("", max_length=200000, description="Source text the data was extracted from")


class ConfidenceRequest(BaseModel):
    confidence_scores: dict[str, ConfidenceScore] = {}
