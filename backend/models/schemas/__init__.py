"""Pydantic contracts for AI extraction output."""

from models.schemas.candidate_fields import CandidateFields
from models.schemas.enhanced_analysis import EnhancedAnalysis

__all__ = [
    "CandidateFields",
    "EnhancedAnalysis",
]
