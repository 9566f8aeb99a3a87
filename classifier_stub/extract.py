from __future__ import annotations
import os
from typing import Optional

import fitz  # PyMuPDF

MIME_KINDS = {"text/plain": ".txt", "application/pdf": ".pdf"}

class UnsupportedDocument(Exception):
    pass

def document_kind(file_name: str, content_type: Optional[str] = None) -> Optional[str]:
    ext = os.path.splitext(file_name or "")[1].lower()
    if ext in (".txt", ".pdf"):
        return ext
    return MIME_KINDS.get((content_type or "").split(";")[0].strip().lower())

def extract_text(file_name: str, content: bytes, content_type: Optional[str] = None) -> str:
    kind = document_kind(file_name, content_type)
    if kind == ".txt":
        return content.decode("utf-8", errors="replace")
    if kind == ".pdf":
        try:
            with fitz.open(stream=content, filetype="pdf") as doc:
                return "\n".join(page.get_text() for page in doc)
        except (fitz.FileDataError, RuntimeError) as e:
            raise UnsupportedDocument(f"could not read PDF: {e}") from e
    raise UnsupportedDocument(f"unsupported file type: {file_name}")
