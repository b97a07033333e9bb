"""Root endpoint: a plain-text greeting useful as a liveness check."""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def index(request: Request) -> str:
    return request.app.state.settings.greeting
