"""Split calculation strategies"""

from typing import Optional

from tripsplit.models.expense import SplitKind
from tripsplit.services.split_strategies.base import BaseSplitStrategy
from tripsplit.services.split_strategies.equal_split import (EqualSplitStrategy,
                                                             distribute_equally)
from tripsplit.services.split_strategies.exact_split import (
    ExactSplitStrategy, adjust_exact_split, check_exact_split)


def get_split_strategy(
    split_kind: SplitKind, remainder_order: Optional[str] = None
) -> Optional[BaseSplitStrategy]:
    """
    Get appropriate split strategy based on split kind.

    Args:
        split_kind: Kind of split (EQUAL or EXACT)
        remainder_order: Remainder placement for equal splits

    Returns:
        Instance of appropriate strategy, or None for reserved kinds (PERCENT)
    """
    strategies = {
        SplitKind.EQUAL: EqualSplitStrategy(remainder_order),
        SplitKind.EXACT: ExactSplitStrategy(),
    }

    return strategies.get(split_kind)


__all__ = [
    "BaseSplitStrategy",
    "EqualSplitStrategy",
    "ExactSplitStrategy",
    "adjust_exact_split",
    "check_exact_split",
    "distribute_equally",
    "get_split_strategy",
]
