"""Expense schemas"""

from decimal import Decimal, InvalidOperation
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from tripsplit.models.expense import SplitDetail, SplitKind


def _to_decimal(value) -> Decimal:
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {value}")


class ExactShareInput(BaseModel):
    """Manually entered share for one member, in major units"""

    member_id: str
    amount: Decimal = Field(..., ge=0)

    @field_validator("amount", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        """Convert numeric values to Decimal"""
        if v is None:
            return v
        return _to_decimal(v)


class ExpenseCreate(BaseModel):
    """Schema for creating an expense from user input"""

    title: str = Field(..., max_length=500, min_length=1)
    amount: Decimal
    payer_id: str
    split_kind: SplitKind = SplitKind.EQUAL
    # Selection order; the equal split remainder goes to the first members
    member_ids: List[str] = Field(default_factory=list)
    exact_amounts: List[ExactShareInput] = Field(default_factory=list)
    # Push an exact split's leftover onto the first member instead of rejecting it
    adjust_remainder: bool = False

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount(cls, v):
        """Convert amount to Decimal"""
        return _to_decimal(v)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        """Titles are stored trimmed"""
        v = v.strip()
        if not v:
            raise ValueError("Title cannot be blank")
        return v


class ExpenseUpdate(ExpenseCreate):
    """Schema for replacing an expense"""


class ExactSplitCheck(BaseModel):
    """Result of checking manually entered shares against the total"""

    total: int
    allocated: int
    difference: int  # total - allocated; positive means under-allocated

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def is_balanced(self) -> bool:
        return self.difference == 0


class ExactSplitAdjustment(BaseModel):
    """Exact split after pushing the leftover onto the first member"""

    splits: List[SplitDetail]
    adjusted_member_id: Optional[str] = None
    adjustment: int = 0

    model_config = ConfigDict(frozen=True)
