"""Deterministic cleanup of AI-extracted candidate data.

Kept separate from the generation step so it can be tested without any
network access. Every function here is pure; malformed input is a caller
bug and raises ``TypeError`` instead of being silently repaired.
"""

import math
import re
from collections.abc import Mapping
from fractions import Fraction
from numbers import Real
from typing import Any

from models.schemas.candidate_fields import CandidateFields

LIST_FIELDS: tuple[str, ...] = (
    "industries",
    "seniority_levels_placed",
    "market_focus",
    "recruitment_tools",
    "sourcing_methods",
    "strengths",
    "red_flags",
    "push_factors",
    "pull_factors",
    "stay_factors",
    "languages",
)

TEXT_FIELDS: tuple[str, ...] = (
    "name",
    "email",
    "phone",
    "location",
    "current_job_title",
    "current_company",
    "ai_summary",
)

# Fields weighted at 70% in the overall confidence
CRITICAL_FIELDS: frozenset[str] = frozenset({
    "name",
    "current_job_title",
    "current_company",
    "industries",
    "total_years_experience",
})

DEFAULT_CONFIDENCE = 75
CRITICAL_WEIGHT = Fraction(7, 10)
OVERALL_WEIGHT = Fraction(3, 10)

LINKEDIN_URL_RE = re.compile(
    r"^(?:https?://)?(?:www\.)?linkedin\.com/in/[\w\-.]+/?$", re.IGNORECASE
)
_TRAILING_JUNK_RE = re.compile(r"[/\s]+$")


def clamp_score(value: Real) -> Real:
    """Clamp a score to [0, 100]."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"score must be a number, got {type(value).__name__}")
    return max(0, min(100, value))


def clean_list(values: list[Any]) -> list[str]:
    """Drop blank entries and case-insensitive duplicates, keeping first occurrence."""
    seen: set[str] = set()
    cleaned: list[str] = []
    for item in values:
        if item is None:
            continue
        if not isinstance(item, str):
            raise TypeError(f"list entries must be strings, got {type(item).__name__}")
        if not item.strip():
            continue
        key = item.casefold()
        if key not in seen:
            seen.add(key)
            cleaned.append(item)
    return cleaned


def post_process(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Return a cleaned copy of an AI-extracted candidate record.

    - list fields: blanks removed, de-duplicated case-insensitively
    - likelihood_score: clamped to [0, 100]
    - core text fields: trimmed

    Keys not named above pass through untouched. ``raw`` is not modified.
    """
    if not isinstance(raw, Mapping):
        raise TypeError(f"expected a mapping, got {type(raw).__name__}")

    processed = dict(raw)

    for field in LIST_FIELDS:
        value = processed.get(field)
        if isinstance(value, list):
            processed[field] = clean_list(value)

    if processed.get("likelihood_score") is not None:
        processed["likelihood_score"] = clamp_score(processed["likelihood_score"])

    for field in TEXT_FIELDS:
        value = processed.get(field)
        if isinstance(value, str):
            processed[field] = value.strip()

    return processed


def _exact(score: Real) -> Fraction:
    """Exact value of a score as written (0.7 means 7/10, not its binary float)."""
    if isinstance(score, bool) or not isinstance(score, Real):
        raise TypeError(f"confidence scores must be numbers, got {type(score).__name__}")
    if isinstance(score, float):
        if not math.isfinite(score):
            raise TypeError(f"confidence scores must be finite, got {score!r}")
        return Fraction(repr(score))
    return Fraction(score)


def _round_half_up(value: Fraction) -> int:
    return math.floor(value + Fraction(1, 2))


def overall_confidence(confidence_scores: Mapping[str, Real]) -> int:
    """Combine per-field confidences into one 0-100 number.

    Critical fields count for 70% when any are present; otherwise plain mean.
    The result is not clamped, so out-of-range inputs give out-of-range output.
    """
    if not confidence_scores:
        return DEFAULT_CONFIDENCE

    # Fraction keeps 0.7/0.3 weighting exact so .5 ties round predictably
    all_scores = [_exact(s) for s in confidence_scores.values()]
    critical = [
        _exact(score)
        for key, score in confidence_scores.items()
        if key in CRITICAL_FIELDS
    ]
    overall_avg = sum(all_scores) / len(all_scores)

    if critical:
        critical_avg = sum(critical) / len(critical)
        return _round_half_up(CRITICAL_WEIGHT * critical_avg + OVERALL_WEIGHT * overall_avg)

    return _round_half_up(overall_avg)


def validate_linkedin_url(url: str) -> bool:
    """Check that ``url`` points at a LinkedIn member profile (``/in/<slug>``)."""
    return bool(LINKEDIN_URL_RE.match(url))


def normalize_linkedin_url(url: str) -> str:
    """Canonical form: lowercase, https scheme, www host, no trailing slash."""
    normalized = url.lower().strip()
    if not normalized.startswith("http"):
        normalized = "https://" + normalized
    if "www." not in normalized:
        normalized = normalized.replace("linkedin.com", "www.linkedin.com", 1)
    # Trailing slashes and whitespace go together so a second pass is a no-op
    return _TRAILING_JUNK_RE.sub("", normalized)


def validate_candidate_fields(raw: Mapping[str, Any]) -> CandidateFields:
    """Validate a post-processed record against the CandidateFields schema.

    Raises pydantic.ValidationError when the AI returned the wrong shape.
    """
    return CandidateFields.model_validate(dict(raw))
