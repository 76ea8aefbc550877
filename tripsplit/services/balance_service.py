"""Balance calculation logic"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from tripsplit.models.expense import Expense
from tripsplit.models.member import Member
from tripsplit.schemas.balance import Balance, BalanceSummary, MemberSummary
from tripsplit.services.validation import (is_positive_amount, is_valid_amount,
                                           is_valid_member_id, known_member_ids)
from tripsplit.utils.money_utils import sum_minor_units

logger = logging.getLogger(__name__)

# (payer_id, amount, [(member_id, share)])
LedgerEntry = Tuple[str, int, List[Tuple[str, int]]]


class BalanceService:
    """Service for balance calculation operations"""

    @staticmethod
    def _read_expense(expense: Any) -> Optional[LedgerEntry]:
        """
        Pull the ledger-relevant fields out of an expense record.

        Args:
            expense: Expense record

        Returns:
            (payer_id, amount, splits) or None if the record is malformed
        """
        expense_id = getattr(expense, "id", None)
        amount = getattr(expense, "amount", None)
        payer_id = getattr(expense, "payer_id", None)
        raw_splits = getattr(expense, "splits", None)

        if not is_positive_amount(amount):
            logger.warning("Dropping expense %r: invalid amount %r", expense_id, amount)
            return None

        if not is_valid_member_id(payer_id):
            logger.warning("Dropping expense %r: invalid payer id %r", expense_id, payer_id)
            return None

        if not isinstance(raw_splits, (list, tuple)) or not raw_splits:
            logger.warning("Dropping expense %r: missing splits", expense_id)
            return None

        splits: List[Tuple[str, int]] = []
        for split in raw_splits:
            member_id = getattr(split, "member_id", None)
            share = getattr(split, "amount", None)
            if not is_valid_member_id(member_id) or not is_valid_amount(share) or share < 0:
                logger.warning(
                    "Dropping expense %r: malformed split %r", expense_id, split
                )
                return None
            splits.append((member_id, share))

        allocated = sum_minor_units(share for _, share in splits)
        if allocated != amount:
            logger.warning(
                "Dropping expense %r: splits sum to %d, amount is %d",
                expense_id, allocated, amount,
            )
            return None

        return payer_id, amount, splits

    @staticmethod
    def _read_expenses(expenses: Any) -> List[LedgerEntry]:
        """Read every well-formed expense, skipping the rest"""
        if expenses is None:
            return []
        try:
            records = list(expenses)
        except TypeError:
            logger.warning("Expense list is not iterable: %r", expenses)
            return []

        entries = []
        for expense in records:
            entry = BalanceService._read_expense(expense)
            if entry is not None:
                entries.append(entry)
        return entries

    @staticmethod
    def compute_balances(members: List[Member], expenses: List[Expense]) -> List[Balance]:
        """
        Compute the net balance of every member over the whole expense history.

        The payer of each expense is credited the full amount and every split
        member is debited their share. Credits or debits for member ids that
        are not in ``members`` are dropped and logged, never invented.

        Args:
            members: Members of the trip
            expenses: Full expense history of the trip

        Returns:
            One Balance per known member, in member order
            (positive = is owed, negative = owes)
        """
        member_ids = known_member_ids(members)
        balances: Dict[str, int] = {member_id: 0 for member_id in member_ids}

        entries = BalanceService._read_expenses(expenses)
        for payer_id, amount, splits in entries:
            if payer_id in balances:
                balances[payer_id] += amount
            else:
                logger.warning("Dropping credit of %d to unknown payer %s", amount, payer_id)

            for member_id, share in splits:
                if member_id in balances:
                    balances[member_id] -= share
                else:
                    logger.warning("Dropping debit of %d for unknown member %s", share, member_id)

        logger.debug(
            "Computed balances for %d members from %d expenses", len(balances), len(entries)
        )

        return [
            Balance(member_id=member_id, amount=amount)
            for member_id, amount in balances.items()
        ]

    @staticmethod
    def total_paid(member_id: str, expenses: List[Expense]) -> int:
        """
        Total amount a member paid for.

        Args:
            member_id: Member ID
            expenses: Expense history

        Returns:
            Sum of amounts of expenses the member paid, in minor units
        """
        return sum_minor_units(
            amount
            for payer_id, amount, _ in BalanceService._read_expenses(expenses)
            if payer_id == member_id
        )

    @staticmethod
    def total_share(member_id: str, expenses: List[Expense]) -> int:
        """
        Total amount a member consumed.

        Args:
            member_id: Member ID
            expenses: Expense history

        Returns:
            Sum of the member's split amounts, in minor units
        """
        return sum_minor_units(
            share
            for _, _, splits in BalanceService._read_expenses(expenses)
            for split_member_id, share in splits
            if split_member_id == member_id
        )

    @staticmethod
    def get_member_summaries(
        members: List[Member], expenses: List[Expense]
    ) -> List[MemberSummary]:
        """
        Paid, consumed and net figures for every member.

        Args:
            members: Members of the trip
            expenses: Expense history

        Returns:
            One MemberSummary per known member, in member order
        """
        entries = BalanceService._read_expenses(expenses)
        paid: Dict[str, int] = {member_id: 0 for member_id in known_member_ids(members)}
        consumed: Dict[str, int] = dict.fromkeys(paid, 0)

        for payer_id, amount, splits in entries:
            if payer_id in paid:
                paid[payer_id] += amount
            for member_id, share in splits:
                if member_id in consumed:
                    consumed[member_id] += share

        return [
            MemberSummary(
                member_id=member_id,
                total_paid=paid[member_id],
                total_share=consumed[member_id],
                balance=paid[member_id] - consumed[member_id],
            )
            for member_id in paid
        ]

    @staticmethod
    def get_balance_summary(
        members: List[Member], expenses: List[Expense]
    ) -> BalanceSummary:
        """
        Get balance summary for a trip.

        Args:
            members: Members of the trip
            expenses: Expense history

        Returns:
            BalanceSummary object
        """
        entries = BalanceService._read_expenses(expenses)
        balances = BalanceService.compute_balances(members, expenses)

        debts = [-balance.amount for balance in balances if balance.amount < 0]
        num_creditors = sum(1 for balance in balances if balance.amount > 0)

        return BalanceSummary(
            total_spent=sum_minor_units(amount for _, amount, _ in entries),
            expense_count=len(entries),
            outstanding_debt=sum_minor_units(debts),
            num_debtors=len(debts),
            num_creditors=num_creditors,
        )
