"""Equal split strategy"""

import logging
from typing import List, Optional

from tripsplit.config import REMAINDER_ORDERS, get_settings
from tripsplit.models.expense import SplitDetail
from tripsplit.services.split_strategies.base import BaseSplitStrategy
from tripsplit.services.validation import clean_member_ids, is_positive_amount

logger = logging.getLogger(__name__)


def distribute_equally(
    total_amount: int,
    member_ids: List[str],
    remainder_order: Optional[str] = None,
) -> List[SplitDetail]:
    """
    Allocate an amount across members as evenly as whole minor units allow.

    Everyone gets ``total // n``; the first ``total % n`` members get one
    extra unit. With ``remainder_order="selection"`` the first members are
    the first ones the caller selected, with ``"member_id"`` the ids are
    sorted first so the result does not depend on selection order.

    Args:
        total_amount: Amount in minor units, must be positive
        member_ids: Selected members, in selection order
        remainder_order: "selection" or "member_id" (default from settings)

    Returns:
        One SplitDetail per member, or [] for a non-positive amount or an
        empty selection
    """
    if not is_positive_amount(total_amount):
        logger.debug("Equal split rejected: invalid total %r", total_amount)
        return []

    ids = clean_member_ids(member_ids)
    if not ids:
        logger.debug("Equal split rejected: empty selection")
        return []

    order = remainder_order or get_settings().remainder_order
    if order not in REMAINDER_ORDERS:
        logger.warning(
            "Unknown remainder order %r, using selection order", order
        )
        order = "selection"
    if order == "member_id":
        ids = sorted(ids)

    count = len(ids)
    base_amount, remainder = divmod(total_amount, count)

    return [
        SplitDetail(member_id=member_id, amount=base_amount + (1 if index < remainder else 0))
        for index, member_id in enumerate(ids)
    ]


class EqualSplitStrategy(BaseSplitStrategy):
    """Strategy for splitting expense equally among participants"""

    def __init__(self, remainder_order: Optional[str] = None):
        self.remainder_order = remainder_order

    def calculate_splits(
        self, total_amount: int, participant_data: List[dict]
    ) -> List[SplitDetail]:
        """
        Calculate equal split for all participants.

        Args:
            total_amount: Total expense amount in minor units
            participant_data: List of participant information (member_id)

        Returns:
            List of SplitDetail with amounts differing by at most one unit
        """
        member_ids = [
            participant.get("member_id")
            for participant in participant_data or []
            if isinstance(participant, dict)
        ]
        return distribute_equally(total_amount, member_ids, self.remainder_order)
