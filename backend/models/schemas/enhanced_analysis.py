"""Strategic enhancement output layered on top of a first-pass extraction."""

from pydantic import BaseModel, ConfigDict


class EnhancedAnalysis(BaseModel):
    """Structured output of the enhancement call.

    Merged back into CandidateFields by the extractor; never returned as-is.
    """
    model_config = ConfigDict(extra="ignore")

    enhanced_summary: str = ""
    competitive_positioning: str = ""
    hiring_potential: str = ""
    engagement_strategy: list[str] = []
    risk_factors: list[str] = []
    value_proposition: list[str] = []
    updated_likelihood_score: float | None = None
    next_steps: list[str] = []
