from pydantic import BaseModel, ConfigDict
from typing import Optional

class Classification(BaseModel):
    model_config = ConfigDict(extra="ignore")

    category: str
    is_productive: bool

class SuggestedResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    generated: bool
    message: str = ""
    text: Optional[str] = None

class ClassificationResult(BaseModel):
    model_config = ConfigDict(extra="ignore")

    success: bool
    text: str = ""
    classification: Classification
    response: SuggestedResponse
    timestamp: Optional[str] = None
