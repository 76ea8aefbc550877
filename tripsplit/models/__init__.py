"""Domain models"""
from tripsplit.models.member import Member, new_member
from tripsplit.models.expense import Expense, SplitDetail, SplitKind

__all__ = ["Member", "new_member", "Expense", "SplitDetail", "SplitKind"]
