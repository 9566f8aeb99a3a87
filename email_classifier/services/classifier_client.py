from __future__ import annotations
import logging
from typing import Any, Dict, Optional, Tuple

import requests
from pydantic import ValidationError as SchemaError

from email_classifier.config import CLASSIFIER_API_URL, PROCESS_EMAIL_PATH, REQUEST_TIMEOUT
from email_classifier.errors import RequestError
from email_classifier.models import SubmissionInput
from email_classifier.schemas import ClassificationResult

logger = logging.getLogger(__name__)

def build_multipart(submission: SubmissionInput) -> Dict[str, Tuple[Optional[str], Any, Optional[str]]]:
    # (None, value) parts keep the body multipart even without a file
    parts: Dict[str, Tuple[Optional[str], Any, Optional[str]]] = {}
    if submission.has_text:
        parts["email_text"] = (None, submission.text, None)
    if submission.file is not None:
        f = submission.file
        parts["email_file"] = (f.name, f.content, f.mime_type or "application/octet-stream")
    return parts

def classify_email(submission: SubmissionInput, api_url: Optional[str] = None,
                   timeout: float = REQUEST_TIMEOUT) -> ClassificationResult:
    url = (api_url or CLASSIFIER_API_URL).rstrip("/") + PROCESS_EMAIL_PATH
    logger.info("POST %s (%s)", url, submission.kind)
    try:
        resp = requests.post(url, files=build_multipart(submission), timeout=timeout)
    except requests.RequestException as e:
        raise RequestError(str(e)) from e

    if not resp.ok:
        raise RequestError(resp.reason or f"HTTP {resp.status_code}", status_code=resp.status_code)

    try:
        result = ClassificationResult.model_validate(resp.json())
    except (ValueError, SchemaError) as e:
        raise RequestError(f"Resposta inválida do classificador: {e}", status_code=resp.status_code) from e

    if not result.success:
        raise RequestError(result.response.message or "Falha ao classificar o email", status_code=resp.status_code)
    return result
