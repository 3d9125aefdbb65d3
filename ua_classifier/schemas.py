# ua_classifier/schemas.py

from pydantic import BaseModel, Field, StrictStr
from typing import Optional
from datetime import datetime


class ClassifyRequest(BaseModel):
    """Incoming classification request"""

    # Length limit comes from settings, enforced by the service
    ua_string: StrictStr = Field(..., min_length=1)

    class Config:
        extra = "ignore"  # Ignore unexpected fields


class _Frozen(BaseModel):
    class Config:
        frozen = True


class OS(_Frozen):
    name: str = "Unknown"
    version: Optional[str] = None


class Browser(_Frozen):
    name: Optional[str] = None
    version: Optional[str] = None
    major: Optional[str] = None


class Device(_Frozen):
    type: str  # Never empty
    vendor: Optional[str] = None
    model: Optional[str] = None


class Engine(_Frozen):
    name: Optional[str] = None
    version: Optional[str] = None


class CPU(_Frozen):
    architecture: Optional[str] = None


class Bot(_Frozen):
    name: str
    type: str  # crawler, automation


class ClassificationResult(_Frozen):
    """Normalized classification of one UA string"""

    os: OS
    browser: Browser
    device: Device
    engine: Engine
    cpu: CPU
    bot: Optional[Bot] = None


class Metadata(_Frozen):
    parsed_at: datetime
    parser_version: str
    confidence_score: int = Field(..., ge=0, le=100)
    processing_time_ms: int = Field(..., ge=0)
    cache_hit: bool = False


class ClassificationResponse(ClassificationResult):
    metadata: Metadata

    def as_cache_hit(self) -> "ClassificationResponse":
        """Copy flagged as served from cache, leaving the stored record untouched"""
        return self.model_copy(
            update={"metadata": self.metadata.model_copy(update={"cache_hit": True})}
        )

    @property
    def result(self) -> ClassificationResult:
        return ClassificationResult(**self.model_dump(exclude={"metadata"}))


class ErrorResponse(BaseModel):
    error: str  # Stable machine-readable kind
    detail: str
