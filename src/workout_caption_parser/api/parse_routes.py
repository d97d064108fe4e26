"""
Parse endpoints for workout captions

POST /parse/caption   caption text -> AST, review rows, steps, compact summary
POST /parse/timeline  caption text -> work/rest interval timeline with totals
"""

import asyncio
import logging
from typing import Any, Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from workout_caption_parser.config import settings
from workout_caption_parser.models import (
    CompactWorkout,
    IntervalStep,
    Platform,
    TimelineTotals,
    WorkoutAST,
    WorkoutRow,
    WorkoutStep,
)
from workout_caption_parser.services.caption_parser import (
    CaptionParserError,
    parse_caption,
    parse_workout_ast,
)
from workout_caption_parser.services.timeline_builder import build_interval_timeline

logger = logging.getLogger(__name__)

router = APIRouter()

# ---------------------------------------------------------------------------
# Request/Response Models
# ---------------------------------------------------------------------------

class ParseCaptionRequest(BaseModel):
    """Request model for POST /parse/caption and POST /parse/timeline"""
    text: str = Field(..., max_length=settings.MAX_CAPTION_CHARS, description="Caption text to parse")
    title: Optional[str] = Field(default=None, max_length=200, description="Workout title supplied by the caller")
    platform: Optional[Platform] = Field(default=None, description="Source platform; inferred from source_url when omitted")
    source_url: Optional[str] = Field(default=None, max_length=2048)

    def provenance(self) -> dict[str, Any]:
        return {"platform": self.platform, "source_url": self.source_url}


class ParseCaptionResponse(BaseModel):
    """Response model for POST /parse/caption"""
    success: bool
    ast: WorkoutAST
    rows: list[WorkoutRow]
    steps: list[WorkoutStep]
    summary: CompactWorkout
    confidence: float = Field(default=0, ge=0, le=1)
    needs_review: bool = Field(default=False, description="Confidence is below the review threshold")


class TimelineResponse(BaseModel):
    """Response model for POST /parse/timeline"""
    steps: list[IntervalStep]
    totals: TimelineTotals


# ---------------------------------------------------------------------------
# API Endpoints
# ---------------------------------------------------------------------------

@router.post("/parse/caption")
async def parse_caption_endpoint(request: ParseCaptionRequest) -> JSONResponse:
    """
    Parse a workout caption into a block/mode-aware AST.

    ## Request Body
    - **text**: Caption text (e.g., "3x10 Push-ups\\nRest 60s\\n3x10 Squats")
    - **title**: Optional workout title
    - **platform** / **source_url**: Optional provenance

    ## Response
    - ast: blocks, modes, movements, scoring, cap, scaling, confidence
    - rows: one row per (block, round, movement)
    - steps: ordered exercise/rest/header/time steps
    - summary: compact exercise summary
    - needs_review: true when confidence is below the review threshold
    """
    try:
        result = await asyncio.to_thread(
            parse_caption, request.text, request.provenance(), request.title
        )
    except CaptionParserError as e:
        logger.warning(f"[parse_caption] rejected caption: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    confidence = result.ast.confidence
    response = ParseCaptionResponse(
        success=bool(result.ast.movements()),
        ast=result.ast,
        rows=result.rows,
        steps=result.steps,
        summary=result.summary,
        confidence=confidence,
        needs_review=confidence < settings.REVIEW_CONFIDENCE_THRESHOLD,
    )
    return JSONResponse(response.model_dump(mode="json"))


@router.post("/parse/timeline")
async def parse_timeline_endpoint(request: ParseCaptionRequest) -> JSONResponse:
    """Parse a caption and return its work/rest interval timeline with totals."""
    try:
        ast = await asyncio.to_thread(
            parse_workout_ast, request.text, request.provenance(), request.title
        )
    except CaptionParserError as e:
        logger.warning(f"[parse_timeline] rejected caption: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    timeline = build_interval_timeline(ast)
    response = TimelineResponse(steps=timeline.steps, totals=timeline.totals)
    return JSONResponse(response.model_dump(mode="json"))
