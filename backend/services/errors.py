"""Extraction failure taxonomy.

Raised inside the extraction pipeline and converted to a tagged
``ExtractionResult`` at its boundary; never surfaced to callers as exceptions.
"""


class ExtractionError(Exception):
    """Base class. ``message`` is shown to the recruiter verbatim."""

    code: str = "extraction_error"
    status_code: int = 400
    message: str = "Extraction failed. Please try again or enter details manually."

    def __init__(self, message: str | None = None, detail: str | None = None) -> None:
        if message is not None:
            self.message = message
        self.detail = detail
        super().__init__(detail or self.message)


class UnsupportedFileType(ExtractionError):
    code = "unsupported_file_type"
    status_code = 415
    message = "Unsupported file type. Please upload PDF, DOCX, PNG, or JPG files."


class FileTooLarge(ExtractionError):
    code = "file_too_large"
    status_code = 413
    message = "File size too large. Please upload files smaller than {limit_mb}MB."

    def __init__(self, limit_mb: int, detail: str | None = None) -> None:
        super().__init__(self.message.format(limit_mb=limit_mb), detail)


class UnreadableContent(ExtractionError):
    code = "unreadable_content"
    status_code = 422
    message = (
        "Unable to extract meaningful content from the file. The file may be corrupted, "
        "password-protected, or contain insufficient text. Please try a different file "
        "or enter details manually."
    )


class InvalidSourceUrl(ExtractionError):
    code = "invalid_source_url"
    status_code = 422
    message = (
        "Please enter a valid LinkedIn profile URL. Format: "
        "https://www.linkedin.com/in/username or https://linkedin.com/in/username"
    )


class InaccessibleSourceContent(ExtractionError):
    code = "inaccessible_source_content"
    status_code = 422
    message = (
        "Unable to access sufficient content from this LinkedIn profile. The profile may be "
        "private, have limited public information, or be temporarily unavailable. Please "
        "check the URL and ensure the profile is public."
    )


class UpstreamServiceFailure(ExtractionError):
    code = "upstream_service_failure"
    status_code = 502
    message = (
        "The AI extraction service could not process this request. This could be due to "
        "network issues or a temporary service outage. Please try again or enter details "
        "manually."
    )
