"""Balance schemas"""
from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class Balance(BaseModel):
    """Net position of one member (positive = is owed, negative = owes)"""
    member_id: str
    amount: int = Field(..., strict=True)

    model_config = ConfigDict(frozen=True)


class Settlement(BaseModel):
    """A single transfer from a debtor to a creditor"""
    from_member_id: str
    to_member_id: str
    amount: int = Field(..., gt=0, strict=True)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_members(self) -> "Settlement":
        """A member never pays themselves"""
        if self.from_member_id == self.to_member_id:
            raise ValueError("Settlement must be between two different members")
        return self


class MemberSummary(BaseModel):
    """What a member paid versus consumed over the trip"""
    member_id: str
    total_paid: int
    total_share: int
    balance: int

    model_config = ConfigDict(frozen=True)


class BalanceSummary(BaseModel):
    """Summary of the whole trip's balance situation"""
    total_spent: int
    expense_count: int
    outstanding_debt: int
    num_debtors: int
    num_creditors: int

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def is_settled(self) -> bool:
        return self.outstanding_debt == 0
