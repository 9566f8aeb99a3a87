from __future__ import annotations
import os
from typing import Optional

from email_classifier.config import ALLOWED_EXTENSIONS, ALLOWED_MIME_TYPES
from email_classifier.errors import UnsupportedFileTypeError
from email_classifier.models import EmailFile, SubmissionInput, ValidationResult

TEXT_FIELD = "email_text"
EMPTY_SUBMISSION_MESSAGE = "Você deve fornecer um texto ou fazer upload de um arquivo"

def validate_submission(submission: SubmissionInput) -> ValidationResult:
    if submission.has_text or submission.has_file:
        return ValidationResult(valid=True)
    return ValidationResult(valid=False, errors={TEXT_FIELD: EMPTY_SUBMISSION_MESSAGE})

def is_supported_file(name: str, mime_type: Optional[str] = None) -> bool:
    ext = os.path.splitext(name or "")[1].lower()
    return ext in ALLOWED_EXTENSIONS or (mime_type or "").lower() in ALLOWED_MIME_TYPES

def check_email_file(name: str, content: bytes, mime_type: Optional[str] = None) -> EmailFile:
    """Wrap an uploaded file, rejecting anything that is not .txt or .pdf."""
    if not is_supported_file(name, mime_type):
        raise UnsupportedFileTypeError(name, mime_type)
    return EmailFile(name=name, content=content, mime_type=mime_type)
