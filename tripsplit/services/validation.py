"""Input sanitizing shared by the splitter, ledger and settlement planner.

Nothing here raises. Each helper answers a yes/no question about a raw
value or returns a cleaned copy of a raw collection.
"""

import logging
from typing import Any, Iterable, List

logger = logging.getLogger(__name__)


def is_valid_amount(value: Any) -> bool:
    """
    Check that a value is an integer amount in minor units.

    Floats (including NaN and infinity), strings, booleans and None are
    rejected rather than coerced.

    Args:
        value: Raw amount

    Returns:
        True if the value can take part in ledger arithmetic
    """
    return isinstance(value, int) and not isinstance(value, bool)


def is_positive_amount(value: Any) -> bool:
    """Check for a valid amount greater than zero"""
    return is_valid_amount(value) and value > 0


def is_valid_member_id(value: Any) -> bool:
    """Check for a non-blank string id"""
    return isinstance(value, str) and value.strip() != ""


def clean_member_ids(member_ids: Any) -> List[str]:
    """
    Sanitize a caller-supplied member selection.

    Blank or non-string ids are dropped and repeated ids collapse to their
    first occurrence. Selection order is preserved.

    Args:
        member_ids: Raw selection (any iterable; anything else yields [])

    Returns:
        Cleaned list of member ids
    """
    if member_ids is None or isinstance(member_ids, (str, bytes)):
        return []

    try:
        candidates = list(member_ids)
    except TypeError:
        logger.warning("Member selection is not iterable: %r", member_ids)
        return []

    cleaned: List[str] = []
    seen = set()
    for member_id in candidates:
        if not is_valid_member_id(member_id):
            logger.warning("Dropping invalid member id %r from selection", member_id)
            continue
        if member_id in seen:
            continue
        seen.add(member_id)
        cleaned.append(member_id)

    return cleaned


def known_member_ids(members: Iterable[Any]) -> List[str]:
    """
    Collect the ids of well-formed member records, in input order.

    Args:
        members: Member records (anything with an ``id`` attribute)

    Returns:
        Unique member ids
    """
    if members is None:
        return []
    try:
        records = list(members)
    except TypeError:
        logger.warning("Member list is not iterable: %r", members)
        return []
    return clean_member_ids([getattr(member, "id", None) for member in records])
