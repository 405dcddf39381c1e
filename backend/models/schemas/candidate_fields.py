"""Structured candidate fields returned by AI extraction."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

# NaN and infinity are rejected so they never reach confidence arithmetic
ConfidenceScore = Annotated[float, Field(allow_inf_nan=False)]


class CandidateFields(BaseModel):
    """Flat record of everything extraction can learn about a recruiter.

    All fields are optional: the AI returns whatever it could find.
    """
    model_config = ConfigDict(extra="ignore")

    # Basic information
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin_url: str | None = None

    # Professional background
    current_job_title: str | None = None
    current_company: str | None = None
    years_in_current_role: float | None = None
    total_years_experience: float | None = None

    # Recruiting specialization
    industries: list[str] | None = None
    seniority_levels_placed: list[str] | None = None
    market_focus: list[str] | None = None
    recruitment_tools: list[str] | None = None
    sourcing_methods: list[str] | None = None

    # Performance & compensation
    current_salary: str | None = None
    commission_structure: str | None = None
    revenue_generated: str | None = None

    # AI analysis
    ai_summary: str | None = None
    strengths: list[str] | None = None
    red_flags: list[str] | None = None
    push_factors: list[str] | None = None
    pull_factors: list[str] | None = None
    stay_factors: list[str] | None = None
    likelihood_score: float | None = None  # 0-100 after post-processing

    # Qualitative insights
    business_development_exposure: str | None = None
    client_facing_strength: str | None = None
    career_trajectory: str | None = None
    market_reputation: str | None = None
    languages: list[str] | None = None
    cultural_background: str | None = None

    # Extraction metadata
    confidence_scores: dict[str, ConfidenceScore] | None = None  # per-field, 0-100 expected but not enforced
    extraction_quality: Literal["excellent", "good", "fair", "poor"] | None = None
    missing_critical_info: list[str] | None = None
