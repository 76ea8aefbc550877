"""Exact (manual) split strategy"""

import logging
from typing import List, Optional

from tripsplit.models.expense import SplitDetail
from tripsplit.schemas.expense import ExactSplitAdjustment, ExactSplitCheck
from tripsplit.services.split_strategies.base import BaseSplitStrategy
from tripsplit.services.validation import (is_positive_amount, is_valid_amount,
                                           is_valid_member_id)
from tripsplit.utils.money_utils import sum_minor_units

logger = logging.getLogger(__name__)


def _to_split_details(participant_data: List[dict]) -> Optional[List[SplitDetail]]:
    """Build SplitDetail records, or None if any entry is malformed"""
    splits: List[SplitDetail] = []
    seen = set()
    for participant in participant_data or []:
        if not isinstance(participant, dict):
            return None
        member_id = participant.get("member_id")
        amount = participant.get("amount")
        if not is_valid_member_id(member_id) or member_id in seen:
            return None
        if not is_valid_amount(amount) or amount < 0:
            return None
        seen.add(member_id)
        splits.append(SplitDetail(member_id=member_id, amount=amount))
    return splits


def check_exact_split(total_amount: int, splits: List[SplitDetail]) -> ExactSplitCheck:
    """
    Compare manually entered shares against the expense total.

    There is no tolerance: one minor unit off is unbalanced.

    Args:
        total_amount: Expense amount in minor units
        splits: Entered shares

    Returns:
        ExactSplitCheck with the allocated sum and the remaining difference
    """
    total = total_amount if is_valid_amount(total_amount) else 0
    allocated = sum_minor_units(split.amount for split in splits)
    return ExactSplitCheck(total=total, allocated=allocated, difference=total - allocated)


def adjust_exact_split(total_amount: int, splits: List[SplitDetail]) -> ExactSplitAdjustment:
    """
    Push the unallocated difference onto the first member.

    The adjustment is returned alongside the splits so callers can show
    it. No adjustment is made when the split is already balanced, empty,
    or when the first member's share would drop below zero.

    Args:
        total_amount: Expense amount in minor units
        splits: Entered shares, first one is the designated member

    Returns:
        ExactSplitAdjustment with the (possibly) corrected splits
    """
    check = check_exact_split(total_amount, splits)
    if check.is_balanced or not splits or not is_positive_amount(total_amount):
        return ExactSplitAdjustment(splits=list(splits))

    first = splits[0]
    adjusted_amount = first.amount + check.difference
    if adjusted_amount < 0:
        logger.debug(
            "Cannot absorb difference %d into member %s share %d",
            check.difference, first.member_id, first.amount,
        )
        return ExactSplitAdjustment(splits=list(splits))

    adjusted = [SplitDetail(member_id=first.member_id, amount=adjusted_amount)]
    adjusted.extend(splits[1:])
    return ExactSplitAdjustment(
        splits=adjusted,
        adjusted_member_id=first.member_id,
        adjustment=check.difference,
    )


class ExactSplitStrategy(BaseSplitStrategy):
    """Strategy for manually entered amounts"""

    def calculate_splits(
        self, total_amount: int, participant_data: List[dict]
    ) -> List[SplitDetail]:
        """
        Accept manually specified amounts if they add up to the total.

        Args:
            total_amount: Total expense amount in minor units
            participant_data: List of dicts with member_id and amount

        Returns:
            List of SplitDetail with the entered amounts, or [] when the
            entries are malformed or do not sum to total_amount
        """
        if not is_positive_amount(total_amount):
            return []

        splits = _to_split_details(participant_data)
        if not splits:
            logger.debug("Exact split rejected: malformed or empty entries")
            return []

        check = check_exact_split(total_amount, splits)
        if not check.is_balanced:
            logger.debug(
                "Exact split rejected: allocated %d of %d", check.allocated, check.total
            )
            return []

        return splits
