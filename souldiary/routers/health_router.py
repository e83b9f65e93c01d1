from fastapi import APIRouter

from souldiary.schemas.common import BaseResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=BaseResponse)
async def health_check() -> BaseResponse:
    """Health check endpoint."""

    return BaseResponse(success=True, message="healthy")
