"""Unit tests for expense service"""

from decimal import Decimal

import pytest

from tripsplit.core.exceptions import NotFoundError, ValidationError
from tripsplit.models.expense import SplitKind
from tripsplit.schemas.expense import ExactShareInput, ExpenseCreate, ExpenseUpdate
from tripsplit.services.expense_service import ExpenseService


def equal_input(amount="1.00", payer_id="A", member_ids=("A", "B", "C"), **kwargs):
    return ExpenseCreate(
        title="Taxi",
        amount=amount,
        payer_id=payer_id,
        split_kind=SplitKind.EQUAL,
        member_ids=list(member_ids),
        **kwargs,
    )


def exact_input(amount, shares, adjust_remainder=False):
    return ExpenseCreate(
        title="Hotel",
        amount=amount,
        payer_id="A",
        split_kind=SplitKind.EXACT,
        exact_amounts=[ExactShareInput(member_id=m, amount=a) for m, a in shares],
        adjust_remainder=adjust_remainder,
    )


class TestCreateEqualExpense:
    """Test creating equally split expenses"""

    def test_create_expense_success(self, members):
        expense = ExpenseService.create_expense(equal_input(), members)

        assert expense.amount == 100
        assert expense.payer_id == "A"
        assert expense.split_kind == SplitKind.EQUAL
        assert [(s.member_id, s.amount) for s in expense.splits] == [
            ("A", 34),
            ("B", 33),
            ("C", 33),
        ]

    def test_decimal_input_is_rounded_half_up(self, members):
        expense = ExpenseService.create_expense(equal_input(amount="12.345"), members)

        assert expense.amount == 1235

    def test_float_input(self, members):
        expense = ExpenseService.create_expense(equal_input(amount=19.99), members)

        assert expense.amount == 1999

    def test_title_is_trimmed(self, members):
        data = ExpenseCreate(title="  Taxi  ", amount="5", payer_id="A", member_ids=["A"])

        assert ExpenseService.create_expense(data, members).title == "Taxi"

    @pytest.mark.parametrize("amount", ["0", "-5", "0.004"])
    def test_non_positive_amount(self, members, amount):
        with pytest.raises(ValidationError) as exc_info:
            ExpenseService.create_expense(equal_input(amount=amount), members)

        assert "valid amount" in exc_info.value.message

    @pytest.mark.parametrize("amount", ["1e30", "1e999999"])
    def test_huge_amount_is_rejected(self, members, amount):
        with pytest.raises(ValidationError) as exc_info:
            ExpenseService.create_expense(equal_input(amount=amount), members)

        assert "valid amount" in exc_info.value.message

    def test_huge_exact_share_is_rejected(self, members):
        with pytest.raises(ValidationError):
            ExpenseService.create_expense(
                exact_input("1.00", [("A", "1e30"), ("B", "0.50")]), members
            )

    def test_unknown_payer(self, members):
        with pytest.raises(ValidationError) as exc_info:
            ExpenseService.create_expense(equal_input(payer_id="Z"), members)

        assert exc_info.value.details == {"unknown": ["Z"]}

    def test_unknown_split_member(self, members):
        with pytest.raises(ValidationError):
            ExpenseService.create_expense(equal_input(member_ids=("A", "Z")), members)

    def test_empty_selection(self, members):
        with pytest.raises(ValidationError) as exc_info:
            ExpenseService.create_expense(equal_input(member_ids=()), members)

        assert "at least one person" in exc_info.value.message

    def test_percent_is_not_supported(self, members):
        data = equal_input()
        data = data.model_copy(update={"split_kind": SplitKind.PERCENT})

        with pytest.raises(ValidationError) as exc_info:
            ExpenseService.create_expense(data, members)

        assert "PERCENT" in exc_info.value.message


class TestCreateExactExpense:
    """Test creating manually split expenses"""

    def test_balanced_exact_split(self, members):
        expense = ExpenseService.create_expense(
            exact_input("100", [("A", "60"), ("B", "25.50"), ("C", "14.50")]), members
        )

        assert expense.amount == 10000
        assert [s.amount for s in expense.splits] == [6000, 2550, 1450]

    def test_unbalanced_exact_split_is_rejected(self, members):
        """40 + 59 against 100 minor units stays rejected"""
        with pytest.raises(ValidationError) as exc_info:
            ExpenseService.create_expense(
                exact_input("1.00", [("A", "0.40"), ("B", "0.59")]), members
            )

        assert exc_info.value.details["allocated"] == 99
        assert exc_info.value.details["total"] == 100
        assert exc_info.value.details["difference"] == 1

    def test_adjust_remainder_goes_to_first_member(self, members):
        expense = ExpenseService.create_expense(
            exact_input("1.00", [("A", "0.40"), ("B", "0.59")], adjust_remainder=True),
            members,
        )

        assert [(s.member_id, s.amount) for s in expense.splits] == [("A", 41), ("B", 59)]

    def test_adjust_remainder_cannot_go_negative(self, members):
        with pytest.raises(ValidationError):
            ExpenseService.create_expense(
                exact_input("1.00", [("A", "0.01"), ("B", "2.00")], adjust_remainder=True),
                members,
            )

    def test_duplicate_member_share(self, members):
        with pytest.raises(ValidationError):
            ExpenseService.create_expense(
                exact_input("1.00", [("A", "0.50"), ("A", "0.50")]), members
            )

    def test_unknown_member_share(self, members):
        with pytest.raises(ValidationError):
            ExpenseService.create_expense(
                exact_input("1.00", [("A", "0.50"), ("Z", "0.50")]), members
            )

    def test_no_shares(self, members):
        with pytest.raises(ValidationError):
            ExpenseService.create_expense(exact_input("1.00", []), members)

    def test_preview_exact_split(self):
        preview = ExpenseService.preview_exact_split(
            exact_input("10.00", [("B", "3.33"), ("C", "3.33"), ("A", "3.33")])
        )

        assert preview.adjusted_member_id == "B"
        assert preview.adjustment == 1
        assert preview.splits[0].amount == 334


class TestReplaceAndRemoveExpense:
    """Test editing and deleting expenses"""

    def test_replace_keeps_id_and_timestamp(self, members):
        original = ExpenseService.create_expense(equal_input(), members)
        update = ExpenseUpdate(
            title="Taxi home",
            amount=Decimal("2.00"),
            payer_id="B",
            member_ids=["B", "C"],
        )

        replaced = ExpenseService.replace_expense(original, update, members)

        assert replaced.id == original.id
        assert replaced.timestamp == original.timestamp
        assert replaced.title == "Taxi home"
        assert replaced.amount == 200
        assert [s.amount for s in replaced.splits] == [100, 100]

    def test_replace_validates(self, members):
        original = ExpenseService.create_expense(equal_input(), members)
        update = ExpenseUpdate(title="Taxi", amount="1", payer_id="Z", member_ids=["A"])

        with pytest.raises(ValidationError):
            ExpenseService.replace_expense(original, update, members)

    def test_remove_expense(self, members):
        first = ExpenseService.create_expense(equal_input(), members)
        second = ExpenseService.create_expense(equal_input(amount="3"), members)

        remaining = ExpenseService.remove_expense([first, second], first.id)

        assert remaining == [second]

    def test_remove_missing_expense(self, members):
        expense = ExpenseService.create_expense(equal_input(), members)

        with pytest.raises(NotFoundError):
            ExpenseService.remove_expense([expense], "missing")
