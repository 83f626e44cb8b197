# Static informational endpoints (/health-check, /about, /ab?cd)
# movies_lib/api/endpoints/health.py

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "ok"
    message: str = "Server is working!"


@router.get(
    "/health-check",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Check if the server is up and running",
)
async def health_check():
    """
    Liveness check; does not touch the database.
    """
    return HealthResponse()


@router.get(
    "/about",
    response_class=PlainTextResponse,
    summary="Get information about the About page",
)
async def about():
    return "about"


# "/ab?cd" pattern: the "b" is optional
@router.get(
    "/abcd",
    response_class=PlainTextResponse,
    summary="Valid for /abcd and /acd",
)
@router.get("/acd", response_class=PlainTextResponse, include_in_schema=False)
async def ab_optional_cd():
    return "ab?cd"
