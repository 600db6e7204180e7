from __future__ import annotations

from typing import List, Tuple

from .locales import DEFAULT_LANGUAGE, format_month_label


def month_positions(start_month: int, start_year: int, count: int) -> List[Tuple[int, int]]:
    """Return ``count`` consecutive ``(year, month)`` pairs from the start month."""

    if not 1 <= start_month <= 12:
        raise ValueError(f"start_month must be between 1 and 12, got {start_month}")
    if count < 0:
        raise ValueError("count must not be negative")

    base = start_year * 12 + (start_month - 1)
    positions = []
    for offset in range(count):
        year, month_index = divmod(base + offset, 12)
        positions.append((year, month_index + 1))
    return positions


def sequence_months(
    start_month: int,
    start_year: int,
    count: int,
    language: str = DEFAULT_LANGUAGE,
) -> List[str]:
    positions = month_positions(start_month, start_year, count)
    return [format_month_label(year, month, language) for year, month in positions]


__all__ = ["month_positions", "sequence_months"]
