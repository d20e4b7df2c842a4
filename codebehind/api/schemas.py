"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from codebehind.models import CodeBehind, GenerationConfig, IBDocument


class GenerateRequest(BaseModel):
    """Request body for the /generate endpoint."""
    document: IBDocument
    config: GenerationConfig = GenerationConfig()


class GenerateResponse(BaseModel):
    """Response from the /generate endpoint."""
    result: CodeBehind
    rule_count: int
    class_count: int


class RuleInfo(BaseModel):
    id: str
    name: str
