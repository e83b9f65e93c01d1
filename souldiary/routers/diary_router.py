from typing import Any

from fastapi import APIRouter, Depends, Path

from souldiary.core.auth_middleware import get_current_identity
from souldiary.deps import get_diary_service
from souldiary.schemas.auth import TokenIdentity
from souldiary.schemas.common import BaseResponse
from souldiary.schemas.diary import DiaryCreate
from souldiary.services.diary_service import DiaryService

router = APIRouter(tags=["diaries"])


@router.get("/get-diaries", response_model=BaseResponse)
def get_diaries(
    identity: TokenIdentity = Depends(get_current_identity),
    diary_service: DiaryService = Depends(get_diary_service),
) -> Any:
    diaries = diary_service.list_diaries(identity.user_id)
    return BaseResponse(
        success=True,
        message="OK",
        data={"diaries": [d.model_dump(mode="json") for d in diaries], "count": len(diaries)},
    )


@router.get("/get-diary/{diary_id}", response_model=BaseResponse)
def get_diary(
    diary_id: int = Path(..., ge=1),
    identity: TokenIdentity = Depends(get_current_identity),
    diary_service: DiaryService = Depends(get_diary_service),
) -> Any:
    """다이어리 상세 - 남의 다이어리는 없는 다이어리와 똑같이 404"""
    diary = diary_service.get_diary(identity.user_id, diary_id)
    return BaseResponse(success=True, message="OK", data={"diary": diary.model_dump(mode="json")})


@router.post("/add-diary", response_model=BaseResponse)
def add_diary(
    entry: DiaryCreate,
    identity: TokenIdentity = Depends(get_current_identity),
    diary_service: DiaryService = Depends(get_diary_service),
) -> Any:
    diary = diary_service.add_diary(identity.user_id, entry)
    return BaseResponse(success=True, message="Diary added", data={"id": diary.id})


@router.delete("/delete-diary/{diary_id}", response_model=BaseResponse)
def delete_diary(
    diary_id: int = Path(..., ge=1),
    identity: TokenIdentity = Depends(get_current_identity),
    diary_service: DiaryService = Depends(get_diary_service),
) -> Any:
    diary_service.delete_diary(identity.user_id, diary_id)
    return BaseResponse(success=True, message="Diary deleted")
