"""Settle-up planning"""

import logging
from typing import Any, List, Tuple

from tripsplit.schemas.balance import Balance, Settlement
from tripsplit.services.validation import is_valid_amount, is_valid_member_id

logger = logging.getLogger(__name__)


class SettlementService:
    """Service for turning balances into transfers"""

    @staticmethod
    def _read_balances(balances: Any) -> List[Tuple[str, int]]:
        """Copy (member_id, amount) out of well-formed balance records"""
        if balances is None:
            return []
        try:
            records = list(balances)
        except TypeError:
            logger.warning("Balance list is not iterable: %r", balances)
            return []

        entries = []
        seen = set()
        for balance in records:
            member_id = getattr(balance, "member_id", None)
            amount = getattr(balance, "amount", None)
            if not is_valid_member_id(member_id) or not is_valid_amount(amount):
                logger.warning("Skipping malformed balance %r", balance)
                continue
            if member_id in seen:
                logger.warning("Skipping duplicate balance for member %s", member_id)
                continue
            seen.add(member_id)
            entries.append((member_id, amount))
        return entries

    @staticmethod
    def plan_settlements(balances: List[Balance]) -> List[Settlement]:
        """
        Plan transfers that bring every balance back to zero.

        Greedy netting: the member who owes the most pays the member who is
        owed the most, as much as one of them needs, then the one who is
        settled drops out and the next largest takes their place. This
        needs at most ``debtors + creditors - 1`` transfers, but is a
        heuristic; some inputs can be settled with fewer.

        The caller's Balance records are not modified; remaining amounts
        are tracked in private scratch lists.

        Args:
            balances: Net balances, one per member

        Returns:
            Ordered list of Settlement transfers ([] if everyone is settled)
        """
        entries = SettlementService._read_balances(balances)

        # sorted() is stable, so equal amounts keep input order
        debtors = sorted(
            ([member_id, -amount] for member_id, amount in entries if amount <= -1),
            key=lambda entry: -entry[1],
        )
        creditors = sorted(
            ([member_id, amount] for member_id, amount in entries if amount >= 1),
            key=lambda entry: -entry[1],
        )

        settlements: List[Settlement] = []
        debtor_index = 0
        creditor_index = 0

        while debtor_index < len(debtors) and creditor_index < len(creditors):
            debtor = debtors[debtor_index]
            creditor = creditors[creditor_index]

            transfer = min(debtor[1], creditor[1])
            if transfer > 0:
                settlements.append(
                    Settlement(
                        from_member_id=debtor[0],
                        to_member_id=creditor[0],
                        amount=transfer,
                    )
                )

            debtor[1] -= transfer
            creditor[1] -= transfer

            if debtor[1] < 1:
                debtor_index += 1
            if creditor[1] < 1:
                creditor_index += 1

        logger.debug(
            "Planned %d settlements for %d debtors and %d creditors",
            len(settlements), len(debtors), len(creditors),
        )

        return settlements

    @staticmethod
    def settlements_for_member(
        settlements: List[Settlement], member_id: str
    ) -> List[Settlement]:
        """
        Transfers a member sends or receives.

        Args:
            settlements: Planned settlements
            member_id: Member ID

        Returns:
            Settlements where the member is the payer or the recipient
        """
        return [
            settlement
            for settlement in settlements
            if member_id in (settlement.from_member_id, settlement.to_member_id)
        ]
