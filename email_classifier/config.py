from __future__ import annotations
import os

APP_TITLE = "Classificador Inteligente de Emails"
APP_SUBTITLE = "Automatize a classificação e resposta de emails corporativos"

CLASSIFIER_API_URL = os.getenv("CLASSIFIER_API_URL", "http://localhost:8000")
PROCESS_EMAIL_PATH = os.getenv("PROCESS_EMAIL_PATH", "/api/process_email/")
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "60"))

# File upload stays visible in the form; sending it is switched off for now.
FILE_SUBMISSION_ENABLED = os.getenv("FILE_SUBMISSION_ENABLED", "false").lower() in ("1", "true", "yes")

ALLOWED_EXTENSIONS = (".txt", ".pdf")
ALLOWED_MIME_TYPES = ("text/plain", "application/pdf")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
