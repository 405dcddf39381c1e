from fastapi.testclient import TestClient

from api.router import _extraction_response
from main import app
from models.responses import ExtractionResult
from models.schemas.candidate_fields import CandidateFields
from services import candidate_extractor
from services.errors import UnsupportedFileType, UpstreamServiceFailure

client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "gemini_configured" in data


def test_extract_resume_success(monkeypatch):
    async def _extract(content, filename, content_type):
        assert content == b"%PDF-1.4 fake"
        assert filename == "jane.pdf"
        return ExtractionResult(
            success=True,
            data=CandidateFields(name="Jane Doe", industries=["Tech"]),
            confidence_score=82,
            extraction_method="resume",
            raw_content="Jane Doe ...",
        )

    monkeypatch.setattr(candidate_extractor, "extract_from_file", _extract)
    response = client.post(
        "/extract/resume",
        files={"resume_file": ("jane.pdf", b"%PDF-1.4 fake", "application/pdf")},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["data"]["name"] == "Jane Doe"
    assert data["confidence_score"] == 82
    assert data["extraction_method"] == "resume"


def test_extract_resume_rejects_unsupported_type():
    response = client.post(
        "/extract/resume",
        files={"resume_file": ("resume.txt", b"not a resume", "text/plain")},
    )
    assert response.status_code == 415
    data = response.json()
    assert data["success"] is False
    assert data["error_code"] == "unsupported_file_type"
    assert data["error"] == UnsupportedFileType.message


def test_extract_resume_requires_file():
    response = client.post("/extract/resume")
    assert response.status_code == 422


def test_extract_linkedin_invalid_url():
    response = client.post("/extract/linkedin", json={"url": "https://linkedin.com/company/acme"})
    assert response.status_code == 422
    data = response.json()
    assert data["success"] is False
    assert data["error_code"] == "invalid_source_url"


def test_extract_linkedin_upstream_failure(monkeypatch):
    async def _extract(url):
        return ExtractionResult.failure(UpstreamServiceFailure())

    monkeypatch.setattr(candidate_extractor, "extract_from_linkedin", _extract)
    response = client.post("/extract/linkedin", json={"url": "https://www.linkedin.com/in/janedoe"})
    assert response.status_code == 502
    assert response.json()["error_code"] == "upstream_service_failure"


def test_enhance_returns_original_without_gemini(fake_gemini):
    body = {"data": {"name": "Jane Doe", "industries": ["Tech"]}, "raw_content": "resume text"}
    response = client.post("/extract/enhance", json=body)
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Jane Doe"
    assert data["industries"] == ["Tech"]


def test_linkedin_normalize():
    response = client.post("/linkedin/normalize", json={"url": "linkedin.com/in/janedoe/"})
    assert response.status_code == 200
    assert response.json() == {"valid": True, "normalized_url": "https://www.linkedin.com/in/janedoe"}


def test_linkedin_normalize_invalid():
    response = client.post("/linkedin/normalize", json={"url": "https://linkedin.com/company/acme"})
    assert response.status_code == 200
    assert response.json() == {"valid": False, "normalized_url": None}


def test_confidence():
    response = client.post(
        "/confidence", json={"confidence_scores": {"name": 90, "industries": 80, "email": 50}}
    )
    assert response.status_code == 200
    assert response.json() == {"confidence_score": 82}


def test_confidence_empty():
    response = client.post("/confidence", json={})
    assert response.json() == {"confidence_score": 75}


def test_confidence_rejects_non_finite_scores():
    response = client.post(
        "/confidence",
        content=b'{"confidence_scores": {"name": NaN, "email": 50}}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422


class ProfileRemoved(UpstreamServiceFailure):
    code = "profile_removed"
    status_code = 410
    message = "This profile is no longer available."


def test_nested_error_subclass_keeps_its_status():
    response = _extraction_response(ExtractionResult.failure(ProfileRemoved()))
    assert response.status_code == 410
