"""Expense model"""
import enum
from datetime import datetime, timezone
from typing import List
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SplitKind(str, enum.Enum):
    """Enum for split kinds"""
    EQUAL = "EQUAL"
    EXACT = "EXACT"
    # Reserved tag, no split strategy handles it
    PERCENT = "PERCENT"


SUPPORTED_SPLIT_KINDS = frozenset({SplitKind.EQUAL, SplitKind.EXACT})


class SplitDetail(BaseModel):
    """One member's share of an expense, in minor units"""

    member_id: str = Field(..., min_length=1)
    amount: int = Field(..., ge=0, strict=True)

    model_config = ConfigDict(frozen=True)


class Expense(BaseModel):
    """A shared expense paid by one member and consumed by the split members"""

    id: str = Field(default_factory=lambda: uuid4().hex, min_length=1)
    title: str = Field(..., min_length=1, max_length=500)
    amount: int = Field(..., gt=0, strict=True)
    payer_id: str = Field(..., min_length=1)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    split_kind: SplitKind
    splits: List[SplitDetail] = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_splits(self) -> "Expense":
        """Validate the splits add up to the amount exactly"""
        if self.split_kind not in SUPPORTED_SPLIT_KINDS:
            raise ValueError(f"Split kind {self.split_kind.value} is reserved")

        allocated = sum(split.amount for split in self.splits)
        if allocated != self.amount:
            raise ValueError(
                f"Sum of splits ({allocated}) must equal expense amount ({self.amount})"
            )
        return self

    def __repr__(self) -> str:
        return f"<Expense(id={self.id}, title={self.title}, amount={self.amount})>"
