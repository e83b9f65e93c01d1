from typing import List, Optional

from pydantic import BaseModel, Field


class CoinLedgerEntry(BaseModel):
    """코인 원장 항목"""

    id: int = Field(..., description="원장 항목 ID")
    transaction_type: str = Field(..., description="CREDIT 또는 DEBIT")
    delta: int = Field(..., description="코인 변화량")
    balance_after: int = Field(..., description="변동 후 잔액")
    reason: str = Field(..., description="변동 사유")
    ref_id: Optional[str] = Field(None, description="참조 ID")
    created_at: str = Field(..., description="생성 시간")


class CoinHistory(BaseModel):
    """코인 원장 조회 응답"""

    balance: int = Field(..., description="현재 잔액")
    entries: List[CoinLedgerEntry] = Field(..., description="원장 항목 목록 (최신순)")
    total_count: int = Field(..., description="전체 항목 수")
    has_next: bool = Field(..., description="다음 페이지 존재 여부")
