# online/palette.py
from typing import Iterable, List, Optional, Sequence

DEFAULT_PALETTE = [
    "#ef4444",  # red
    "#3b82f6",  # blue
    "#10b981",  # green
    "#f59e0b",  # orange
    "#8b5cf6",  # purple
    "#ec4899",  # pink
    "#06b6d4",  # cyan
    "#84cc16",  # lime
    "#f97316",  # orange-red
    "#6366f1",  # indigo
]


def resolve_palette(palette: Optional[Sequence[str]] = None) -> List[str]:
    """Return a fresh list copy of the palette to use (default if None)."""
    if palette is None:
        return list(DEFAULT_PALETTE)
    pal = list(palette)
    if not pal:
        raise ValueError("Palette must contain at least one color")
    if len(set(pal)) != len(pal):
        raise ValueError(f"Palette contains duplicate colors: {pal}")
    return pal


def first_free_color(palette: Sequence[str], used: Iterable[str]) -> Optional[str]:
    """Earliest palette entry not in `used`; None once the palette is exhausted."""
    used_set = set(used)
    for c in palette:
        if c not in used_set:
            return c
    return None


def count_distinct(coloring: dict) -> int:
    return len(set(coloring.values())) if coloring else 0
