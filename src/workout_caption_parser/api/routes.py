"""Service endpoints: health and version."""
from fastapi import APIRouter

from workout_caption_parser import __version__
from workout_caption_parser.config import settings

router = APIRouter()


@router.get("/version")
async def get_version():
    """Get service version and environment."""
    return {
        "service": "workout-caption-parser",
        "version": __version__,
        "environment": settings.ENVIRONMENT,
    }


@router.get("/health")
def health():
    """Health check endpoint."""
    return {"ok": True}
