"""Pytest fixtures and configuration"""

from typing import List, Optional

import pytest

from tripsplit.config import get_settings
from tripsplit.models.expense import Expense, SplitDetail, SplitKind
from tripsplit.models.member import Member
from tripsplit.services.split_strategies import distribute_equally


def make_expense(
    amount: int,
    payer_id: str,
    member_ids: List[str],
    title: str = "Dinner",
    expense_id: Optional[str] = None,
) -> Expense:
    """Build an equally split expense in minor units"""
    fields = {"id": expense_id} if expense_id else {}
    return Expense(
        title=title,
        amount=amount,
        payer_id=payer_id,
        split_kind=SplitKind.EQUAL,
        splits=distribute_equally(amount, member_ids, "selection"),
        **fields,
    )


def make_exact_expense(amount: int, payer_id: str, shares: dict) -> Expense:
    """Build an exactly split expense from a member_id -> amount mapping"""
    return Expense(
        title="Groceries",
        amount=amount,
        payer_id=payer_id,
        split_kind=SplitKind.EXACT,
        splits=[SplitDetail(member_id=m, amount=a) for m, a in shares.items()],
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings fresh"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def member_a() -> Member:
    return Member(id="A", display_name="Asha")


@pytest.fixture
def member_b() -> Member:
    return Member(id="B", display_name="Bruno")


@pytest.fixture
def member_c() -> Member:
    return Member(id="C", display_name="Chen")


@pytest.fixture
def members(member_a, member_b, member_c) -> List[Member]:
    """Three trip members A, B and C"""
    return [member_a, member_b, member_c]
