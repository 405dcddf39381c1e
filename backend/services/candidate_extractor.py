"""Orchestrator: source material -> AI extraction -> cleaned candidate fields.

Pipeline (resume):
1. Validate content type and size
2. Extract text (PDF / DOCX / image transcription)
3. Gemini structured extraction
4. Post-process, validate against CandidateFields, score confidence

Pipeline (LinkedIn):
1. Validate and normalize the profile URL
2. Scrape the public page
3. Gemini structured extraction
4. Post-process, validate, score

Failures never escape: each entry point returns a tagged ExtractionResult.
"""

import logging
from typing import Any

from pydantic import ValidationError

from config import settings
from models.responses import ExtractionResult
from models.schemas.candidate_fields import CandidateFields
from models.schemas.enhanced_analysis import EnhancedAnalysis
from services import document_parser, gemini_client, profile_scraper, prompt_builder
from services.errors import (
    ExtractionError,
    FileTooLarge,
    InaccessibleSourceContent,
    InvalidSourceUrl,
    UnreadableContent,
    UnsupportedFileType,
    UpstreamServiceFailure,
)
from services.post_processor import (
    normalize_linkedin_url,
    overall_confidence,
    post_process,
    validate_candidate_fields,
    validate_linkedin_url,
)

logger = logging.getLogger(__name__)

LINKEDIN_UPSTREAM_MESSAGE = (
    "Failed to analyze LinkedIn profile. This could be due to network issues, profile privacy "
    "settings, or temporary LinkedIn restrictions. Please try again later or enter details manually."
)


def _finalize(raw: dict[str, Any]) -> tuple[CandidateFields, int]:
    """Clean and validate AI output; map shape problems to an upstream failure."""
    try:
        fields = validate_candidate_fields(post_process(raw))
        confidence = overall_confidence(fields.confidence_scores or {})
    except (TypeError, ValidationError) as e:
        logger.error("AI returned malformed candidate data: %s", e)
        raise UpstreamServiceFailure(detail=str(e)) from e
    return fields, confidence


async def _resume_text(content: bytes, content_type: str) -> str:
    try:
        text = await document_parser.extract_from_bytes(content, content_type)
    except Exception as e:
        logger.warning("Could not read uploaded %s: %s", content_type, e)
        raise UnreadableContent(detail=str(e)) from e

    if len(text) < settings.min_resume_chars:
        raise UnreadableContent(detail=f"only {len(text)} characters extracted")
    return text


async def _extract_file(content: bytes, filename: str, content_type: str | None) -> ExtractionResult:
    ctype = document_parser.resolve_content_type(filename, content_type)
    if ctype is None:
        raise UnsupportedFileType(detail=f"{filename!r} ({content_type})")

    if len(content) > settings.max_upload_size_mb * 1024 * 1024:
        raise FileTooLarge(settings.max_upload_size_mb, detail=f"{len(content)} bytes")

    text = await _resume_text(content, ctype)

    prompt = prompt_builder.build_resume_prompt(text, filename, ctype)
    raw = await gemini_client.generate_object(prompt, prompt_builder.CANDIDATE_EXTRACTION_SCHEMA)
    if raw is None:
        raise UpstreamServiceFailure(detail="no structured output from Gemini")

    fields, confidence = _finalize(raw)
    logger.info("Extracted candidate from %s (confidence %d)", filename, confidence)
    return ExtractionResult(
        success=True,
        data=fields,
        confidence_score=confidence,
        extraction_method="resume",
        raw_content=text,
    )


async def extract_from_file(
    content: bytes, filename: str, content_type: str | None = None
) -> ExtractionResult:
    """Extract candidate fields from an uploaded resume (PDF, DOCX, PNG, JPG)."""
    try:
        return await _extract_file(content, filename, content_type)
    except ExtractionError as e:
        logger.warning("Resume extraction failed (%s): %s", e.code, e)
        return ExtractionResult.failure(e)


async def _extract_linkedin(url: str) -> ExtractionResult:
    if not validate_linkedin_url(url.strip()):
        raise InvalidSourceUrl(detail=url)

    profile_url = normalize_linkedin_url(url)
    page = await profile_scraper.scrape(profile_url)
    if page is None:
        raise UpstreamServiceFailure(LINKEDIN_UPSTREAM_MESSAGE, detail=f"could not fetch {profile_url}")

    if len(page.markdown.strip()) < settings.min_profile_chars:
        raise InaccessibleSourceContent(detail=f"{len(page.markdown.strip())} characters at {profile_url}")

    prompt = prompt_builder.build_linkedin_prompt(
        page.markdown, profile_url, page.title, page.description
    )
    raw = await gemini_client.generate_object(prompt, prompt_builder.CANDIDATE_EXTRACTION_SCHEMA)
    if raw is None:
        raise UpstreamServiceFailure(LINKEDIN_UPSTREAM_MESSAGE, detail="no structured output from Gemini")

    fields, confidence = _finalize({**raw, "linkedin_url": profile_url})
    logger.info("Extracted candidate from %s (confidence %d)", profile_url, confidence)
    return ExtractionResult(
        success=True,
        data=fields,
        confidence_score=confidence,
        extraction_method="linkedin",
        raw_content=page.markdown,
    )


async def extract_from_linkedin(url: str) -> ExtractionResult:
    """Extract candidate fields from a public LinkedIn profile URL."""
    try:
        return await _extract_linkedin(url)
    except ExtractionError as e:
        logger.warning("LinkedIn extraction failed (%s): %s", e.code, e)
        return ExtractionResult.failure(e)


def merge_enhancement(data: CandidateFields, analysis: EnhancedAnalysis) -> CandidateFields:
    """Fold strategic insights into an existing extraction.

    Risks become push factors; value propositions become both pull factors
    and strengths. The merged record is post-processed again.
    """
    merged = data.model_dump()
    merged["ai_summary"] = analysis.enhanced_summary or data.ai_summary
    merged["push_factors"] = (data.push_factors or []) + analysis.risk_factors
    merged["pull_factors"] = (data.pull_factors or []) + analysis.value_proposition
    merged["strengths"] = (data.strengths or []) + analysis.value_proposition
    if analysis.updated_likelihood_score:
        merged["likelihood_score"] = analysis.updated_likelihood_score
    return validate_candidate_fields(post_process(merged))


async def enhance(data: CandidateFields, raw_content: str) -> CandidateFields:
    """Run the strategic enhancement pass. Returns ``data`` unchanged on failure."""
    prompt = prompt_builder.build_enhance_prompt(data.model_dump(exclude_none=True), raw_content)
    raw = await gemini_client.generate_object(prompt, prompt_builder.ENHANCEMENT_SCHEMA)
    if raw is None:
        logger.warning("Gemini enhancement unavailable, returning original analysis")
        return data

    try:
        analysis = EnhancedAnalysis.model_validate(raw)
        return merge_enhancement(data, analysis)
    except (TypeError, ValidationError) as e:
        logger.error("Enhancement returned malformed data: %s", e)
        return data
