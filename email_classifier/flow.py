from __future__ import annotations
import logging
from typing import Callable, Optional

from email_classifier.config import FILE_SUBMISSION_ENABLED
from email_classifier.errors import (
    FileSubmissionDisabled, RequestError, UnsupportedFileTypeError, ValidationError,
)
from email_classifier.models import (
    Done, EmailFile, Idle, Loading, SubmissionInput, SubmissionState, ValidationResult,
)
from email_classifier.schemas import ClassificationResult
from email_classifier.services.classifier_client import classify_email
from email_classifier.validation import check_email_file, validate_submission

logger = logging.getLogger(__name__)

Notifier = Callable[[str, str], None]   # (level, message); level is 'success' | 'error'
Classifier = Callable[..., ClassificationResult]

def _no_notify(level: str, message: str) -> None:
    pass

class SubmissionFlow:
    """
    Holds the state of one email form: Idle -> Loading -> Done | Idle.

    Validation and the disabled-file check raise, since the page renders them
    in place (inline message, modal). Request failures and rejected uploads are
    reported through ``notify``. The flow never stays in Loading after submit.
    """

    def __init__(self, classify: Classifier = classify_email, notify: Optional[Notifier] = None,
                 file_submission_enabled: bool = FILE_SUBMISSION_ENABLED):
        self.classify = classify
        self.notify = notify or _no_notify
        self.file_submission_enabled = file_submission_enabled
        self.state: SubmissionState = Idle()

    @property
    def is_loading(self) -> bool:
        return isinstance(self.state, Loading)

    @property
    def result(self) -> Optional[ClassificationResult]:
        return self.state.result if isinstance(self.state, Done) else None

    def validate(self, submission: SubmissionInput) -> ValidationResult:
        return validate_submission(submission)

    def accept_file(self, name: str, content: bytes, mime_type: Optional[str] = None) -> Optional[EmailFile]:
        try:
            return check_email_file(name, content, mime_type)
        except UnsupportedFileTypeError as e:
            logger.info("Rejected upload %s (%s)", name, mime_type)
            self.notify("error", str(e))
            return None

    def submit(self, submission: SubmissionInput, api_url: Optional[str] = None) -> SubmissionState:
        check = self.validate(submission)
        if not check.valid:
            field, message = next(iter(check.errors.items()))
            raise ValidationError(field, message)
        if submission.has_file and not self.file_submission_enabled:
            raise FileSubmissionDisabled()

        self.state = Loading()
        try:
            result = self.classify(submission, api_url=api_url)
            self.state = Done(result)
        except RequestError as e:
            logger.warning("Classification request failed: %s", e)
            self.state = Idle()
            self.notify("error", f"Erro ao processar email: {e}")
        finally:
            if isinstance(self.state, Loading):
                self.state = Idle()
        return self.state

    @property
    def reply_text(self) -> Optional[str]:
        """Suggested reply ready to copy, or None when there is nothing to copy."""
        result = self.result
        return result.response.text if result is not None else None
