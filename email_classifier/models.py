from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from email_classifier.schemas import ClassificationResult

@dataclass(frozen=True)
class EmailFile:
    name: str
    content: bytes
    mime_type: Optional[str] = None

@dataclass(frozen=True)
class SubmissionInput:
    text: Optional[str] = None
    file: Optional[EmailFile] = None

    @property
    def has_text(self) -> bool:
        return bool(self.text and self.text.strip())

    @property
    def has_file(self) -> bool:
        return self.file is not None

    @property
    def kind(self) -> str:
        # 'text' | 'file' | 'both' | 'empty'
        if self.has_text and self.has_file:
            return "both"
        if self.has_text:
            return "text"
        if self.has_file:
            return "file"
        return "empty"

@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: Dict[str, str] = field(default_factory=dict)

# Submission states. Exactly one is current at a time.
@dataclass(frozen=True)
class Idle:
    pass

@dataclass(frozen=True)
class Loading:
    pass

@dataclass(frozen=True)
class Done:
    result: ClassificationResult

SubmissionState = Union[Idle, Loading, Done]
