"""Default member palettes"""

MEMBER_COLORS = [
    "#FF5252",
    "#FF4081",
    "#E040FB",
    "#7C4DFF",
    "#536DFE",
    "#448AFF",
    "#40C4FF",
    "#18FFFF",
    "#69F0AE",
    "#EEFF41",
    "#FFD740",
    "#FF6E40",
]

AVATARS = ["👽", "👾", "🤖", "👻", "🦄", "🐯", "🐙", "🦖", "🥑", "🍕", "🚀", "💎", "🔥", "⚡️"]
