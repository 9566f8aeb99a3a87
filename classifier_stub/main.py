import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile

from email_classifier.schemas import Classification, ClassificationResult, SuggestedResponse
from .extract import UnsupportedDocument, extract_text
from .settings import settings

logger = logging.getLogger(__name__)

app = FastAPI(title="Email Classifier Stub", version="1.0.0")

@app.get("/healthz")
def healthz():
    return {"status": "ok"}

# Local stand-in for the remote classifier: same contract, canned answer.
@app.post("/api/process_email/", response_model=ClassificationResult)
async def process_email(email_text: Optional[str] = Form(None), email_file: Optional[UploadFile] = File(None)):
    if settings.fail_status:
        raise HTTPException(status_code=settings.fail_status, detail="Simulated failure")

    text = (email_text or "").strip()
    if email_file is not None:
        content = await email_file.read()
        try:
            file_text = extract_text(email_file.filename, content, email_file.content_type).strip()
        except UnsupportedDocument as e:
            raise HTTPException(status_code=415, detail=str(e))
        text = "\n\n".join(t for t in (text, file_text) if t)

    if not text:
        raise HTTPException(status_code=400, detail="email_text or email_file required")

    logger.info("Classifying %d chars as %s", len(text), settings.category)
    return ClassificationResult(
        success=True,
        text=text,
        classification=Classification(category=settings.category, is_productive=settings.is_productive),
        response=SuggestedResponse(
            generated=settings.generate_reply,
            message=settings.reply_message if settings.generate_reply else "Nenhuma resposta necessária",
            text=settings.reply_text if settings.generate_reply else None,
        ),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
