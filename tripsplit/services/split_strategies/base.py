"""Base strategy interface"""

from abc import ABC, abstractmethod
from typing import List

from tripsplit.models.expense import SplitDetail


class BaseSplitStrategy(ABC):
    """Base class for split strategies"""

    @abstractmethod
    def calculate_splits(
        self, total_amount: int, participant_data: List[dict]
    ) -> List[SplitDetail]:
        """
        Calculate split amounts for participants.

        Implementations never raise; an empty list means the split was
        rejected and must not be stored.

        Args:
            total_amount: Total expense amount in minor units
            participant_data: List of participant information (member_id, amount)

        Returns:
            List of SplitDetail objects summing exactly to total_amount, or []
        """
        pass
