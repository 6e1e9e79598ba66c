# videoforge/models/schemas.py
from pydantic import BaseModel
from typing import Optional


class GenerateVideoRequest(BaseModel):
    prompt: Optional[str] = None


class GenerateVideoResponse(BaseModel):
    success: bool = True
    videoUrl: str
    prompt: str
    resolution: str
    model: str


class ErrorResponse(BaseModel):
    error: str
