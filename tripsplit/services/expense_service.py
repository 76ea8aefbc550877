"""Expense business logic"""
import logging
from datetime import datetime
from typing import List, Optional

from tripsplit.core.exceptions import NotFoundError, ValidationError
from tripsplit.models.expense import Expense, SplitDetail, SplitKind
from tripsplit.models.member import Member
from tripsplit.schemas.expense import (ExactSplitAdjustment, ExpenseCreate,
                                       ExpenseUpdate)
from tripsplit.services.split_strategies import (adjust_exact_split,
                                                 check_exact_split,
                                                 get_split_strategy)
from tripsplit.services.validation import known_member_ids
from tripsplit.utils.money_utils import to_minor_units

logger = logging.getLogger(__name__)


class ExpenseService:
    """Service for expense operations"""

    @staticmethod
    def validate_members_exist(member_ids: List[str], members: List[Member]) -> None:
        """
        Validate that all member IDs belong to the trip.

        Args:
            member_ids: Member IDs referenced by the expense
            members: Members of the trip

        Raises:
            ValidationError: If any member ID is unknown
        """
        known = set(known_member_ids(members))
        unknown = [member_id for member_id in member_ids if member_id not in known]
        if unknown:
            raise ValidationError(
                f"Unknown member(s): {', '.join(unknown)}", details={"unknown": unknown}
            )

    @staticmethod
    def convert_amount(amount) -> int:
        """
        Convert a user-entered amount to minor units.

        Args:
            amount: Amount in major units

        Returns:
            Positive amount in minor units

        Raises:
            ValidationError: If the amount is not a positive finite number
        """
        minor = to_minor_units(amount)
        if minor is None or minor <= 0:
            raise ValidationError(f"Please enter a valid amount, got {amount}")
        return minor

    @staticmethod
    def _exact_entries(data: ExpenseCreate) -> List[dict]:
        """Convert manually entered shares to minor units"""
        entries = []
        seen = set()
        for share in data.exact_amounts:
            if share.member_id in seen:
                raise ValidationError(f"Member {share.member_id} entered more than once")
            seen.add(share.member_id)

            amount = to_minor_units(share.amount)
            if amount is None or amount < 0:
                raise ValidationError(
                    f"Invalid amount {share.amount} for member {share.member_id}"
                )
            entries.append({"member_id": share.member_id, "amount": amount})
        return entries

    @staticmethod
    def preview_exact_split(data: ExpenseCreate) -> ExactSplitAdjustment:
        """
        Show what an exact split would look like with its leftover absorbed.

        Lets the caller display the first member's adjustment before the
        expense is submitted.

        Args:
            data: Expense input with exact amounts

        Returns:
            ExactSplitAdjustment (adjustment is 0 when already balanced)

        Raises:
            ValidationError: If the amount or an entered share is invalid
        """
        amount = ExpenseService.convert_amount(data.amount)
        entries = ExpenseService._exact_entries(data)
        splits = [SplitDetail(**entry) for entry in entries]
        return adjust_exact_split(amount, splits)

    @staticmethod
    def _calculate_splits(
        data: ExpenseCreate, amount: int, members: List[Member]
    ) -> List[SplitDetail]:
        """
        Run the split strategy for the expense.

        Raises:
            ValidationError: If the split is rejected
        """
        strategy = get_split_strategy(data.split_kind)
        if strategy is None:
            raise ValidationError(f"Split kind {data.split_kind.value} is not supported")

        if data.split_kind == SplitKind.EQUAL:
            ExpenseService.validate_members_exist(data.member_ids, members)
            splits = strategy.calculate_splits(
                amount, [{"member_id": member_id} for member_id in data.member_ids]
            )
            if not splits:
                raise ValidationError("Select at least one person to split with")
            return splits

        entries = ExpenseService._exact_entries(data)
        ExpenseService.validate_members_exist([e["member_id"] for e in entries], members)
        if not entries:
            raise ValidationError("Enter at least one share")

        splits = strategy.calculate_splits(amount, entries)
        if splits:
            return splits

        entered = [SplitDetail(**entry) for entry in entries]
        check = check_exact_split(amount, entered)
        if data.adjust_remainder:
            adjusted = adjust_exact_split(amount, entered)
            if adjusted.adjusted_member_id is not None:
                logger.info(
                    "Adjusted share of member %s by %d to match total %d",
                    adjusted.adjusted_member_id, adjusted.adjustment, amount,
                )
                return adjusted.splits

        raise ValidationError(
            f"Sum of shares ({check.allocated}) must equal total amount ({check.total})",
            details=check.model_dump(),
        )

    @staticmethod
    def _build_expense(
        data: ExpenseCreate,
        members: List[Member],
        expense_id: Optional[str] = None,
        timestamp: Optional[datetime] = None,
    ) -> Expense:
        amount = ExpenseService.convert_amount(data.amount)
        ExpenseService.validate_members_exist([data.payer_id], members)
        splits = ExpenseService._calculate_splits(data, amount, members)

        fields = {}
        if expense_id is not None:
            fields["id"] = expense_id
        if timestamp is not None:
            fields["timestamp"] = timestamp

        return Expense(
            title=data.title,
            amount=amount,
            payer_id=data.payer_id,
            split_kind=data.split_kind,
            splits=splits,
            **fields,
        )

    @staticmethod
    def create_expense(data: ExpenseCreate, members: List[Member]) -> Expense:
        """
        Create a new expense from user input.

        Args:
            data: Expense input data
            members: Members of the trip

        Returns:
            Accepted Expense whose splits sum exactly to its amount

        Raises:
            ValidationError: If the expense is rejected
        """
        expense = ExpenseService._build_expense(data, members)
        logger.debug("Created expense %s for %d", expense.id, expense.amount)
        return expense

    @staticmethod
    def replace_expense(
        existing: Expense, data: ExpenseUpdate, members: List[Member]
    ) -> Expense:
        """
        Rebuild an edited expense, keeping its id and timestamp.

        Args:
            existing: Expense being edited
            data: New expense input data
            members: Members of the trip

        Returns:
            Replacement Expense

        Raises:
            ValidationError: If the edited expense is rejected
        """
        return ExpenseService._build_expense(
            data, members, expense_id=existing.id, timestamp=existing.timestamp
        )

    @staticmethod
    def remove_expense(expenses: List[Expense], expense_id: str) -> List[Expense]:
        """
        Remove an expense from the history.

        Args:
            expenses: Current expense history
            expense_id: ID of the expense to remove

        Returns:
            New history without the expense

        Raises:
            NotFoundError: If no expense has that ID
        """
        remaining = [expense for expense in expenses if expense.id != expense_id]
        if len(remaining) == len(expenses):
            raise NotFoundError(f"Expense with ID {expense_id} not found")
        return remaining
