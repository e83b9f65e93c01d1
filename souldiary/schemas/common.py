from typing import Any, Optional

from pydantic import BaseModel


class Error(BaseModel):
    code: str
    message: str
    details: Optional[dict] = None


class BaseResponse(BaseModel):
    """모든 응답의 공통 형태 - success 플래그와 사람이 읽을 수 있는 메시지"""

    success: bool = True
    message: str = ""
    data: Optional[Any] = None
    error: Optional[Error] = None
