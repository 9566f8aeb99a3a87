from __future__ import annotations
from typing import Optional

class SubmissionError(Exception):
    pass

class ValidationError(SubmissionError):
    """Input rejected before sending; ``field`` names the form field to flag."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message

class UnsupportedFileTypeError(SubmissionError):
    def __init__(self, file_name: str, mime_type: Optional[str] = None):
        super().__init__(f"Tipo de arquivo não suportado: {file_name}. Use .txt ou .pdf.")
        self.file_name = file_name
        self.mime_type = mime_type

class RequestError(SubmissionError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

class FileSubmissionDisabled(SubmissionError):
    def __init__(self):
        super().__init__(
            "O envio de arquivos está temporariamente desativado. "
            "Mude para o modo texto e cole o conteúdo do email."
        )
