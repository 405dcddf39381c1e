from fastapi import APIRouter, File, Request, UploadFile
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import ConfidenceRequest, EnhanceRequest, LinkedInExtractRequest
from models.responses import ConfidenceResponse, ExtractionResult, LinkedInUrlCheck
from models.schemas.candidate_fields import CandidateFields
from services import candidate_extractor
from services.errors import ExtractionError
from services.post_processor import (
    normalize_linkedin_url,
    overall_confidence,
    validate_linkedin_url,
)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _error_classes(base: type[ExtractionError]) -> list[type[ExtractionError]]:
    """All subclasses of ``base``, however deeply nested."""
    found = []
    for cls in base.__subclasses__():
        found.append(cls)
        found.extend(_error_classes(cls))
    return found


def _extraction_response(result: ExtractionResult) -> JSONResponse:
    """Successful results are 200; failures carry their error's status code."""
    status_code = 200
    if not result.success:
        by_code = {cls.code: cls.status_code for cls in _error_classes(ExtractionError)}
        status_code = by_code.get(result.error_code, 400)
    return JSONResponse(status_code=status_code, content=result.model_dump(mode="json"))


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
    }


@router.post("/extract/resume", response_model=ExtractionResult)
@limiter.limit("10/minute")
async def extract_resume(request: Request, resume_file: UploadFile = File(...)):
    content = await resume_file.read()
    result = await candidate_extractor.extract_from_file(
        content, resume_file.filename or "", resume_file.content_type
    )
    return _extraction_response(result)


@router.post("/extract/linkedin", response_model=ExtractionResult)
@limiter.limit("10/minute")
async def extract_linkedin(request: Request, body: LinkedInExtractRequest):
    result = await candidate_extractor.extract_from_linkedin(body.url)
    return _extraction_response(result)


@router.post("/extract/enhance", response_model=CandidateFields)
@limiter.limit("10/minute")
async def enhance_extraction(request: Request, body: EnhanceRequest):
    return await candidate_extractor.enhance(body.data, body.raw_content)


@router.post("/linkedin/normalize", response_model=LinkedInUrlCheck)
async def check_linkedin_url(body: LinkedInExtractRequest):
    if not validate_linkedin_url(body.url.strip()):
        return LinkedInUrlCheck(valid=False)
    return LinkedInUrlCheck(valid=True, normalized_url=normalize_linkedin_url(body.url))


@router.post("/confidence", response_model=ConfidenceResponse)
async def confidence(body: ConfidenceRequest):
    return ConfidenceResponse(confidence_score=overall_confidence(body.confidence_scores))
