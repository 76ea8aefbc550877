"""Member model"""
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from tripsplit.core.constants import AVATARS, MEMBER_COLORS


class Member(BaseModel):
    """A person taking part in a trip"""

    id: str = Field(default_factory=lambda: uuid4().hex, min_length=1)
    display_name: str = Field(..., min_length=1, max_length=100)
    color: str = MEMBER_COLORS[0]
    avatar_glyph: str = AVATARS[0]

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return f"<Member(id={self.id}, display_name={self.display_name})>"


def new_member(display_name: str, position: int = 0) -> Member:
    """
    Create a member with a default color and avatar.

    The palettes are cycled by position so the n-th member of a trip
    gets a distinct look until the palette wraps around.

    Args:
        display_name: Name shown for the member
        position: Index of the member within the trip

    Returns:
        New Member with a generated id
    """
    return Member(
        display_name=display_name.strip(),
        color=MEMBER_COLORS[position % len(MEMBER_COLORS)],
        avatar_glyph=AVATARS[position % len(AVATARS)],
    )
