"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from codebehind.core.errors import CodeBehindError
from codebehind.services.codebehind_service import CodeBehindService
from codebehind.api.schemas import (
    GenerateRequest, GenerateResponse, RuleInfo,
)

router = APIRouter()

# Shared service instance
_service = CodeBehindService()


@router.post("/generate", response_model=GenerateResponse)
async def generate_codebehind(request: GenerateRequest) -> GenerateResponse:
    """Generate partial class declarations from an interface document."""
    try:
        result = _service.generate(request.document, request.config)
    except CodeBehindError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return GenerateResponse(
        result=result,
        rule_count=len(_service.list_rules()),
        class_count=len(result.declarations),
    )


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all available member rules."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
