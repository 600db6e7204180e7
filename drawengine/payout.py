"""Payout arithmetic and amount formatting for pool winners."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Union

from .errors import FormattingFailure
from .locales import DEFAULT_LANGUAGE, apply_separators, get_locale
from .types import ItemType, PoolConfiguration

logger = logging.getLogger("goldpool.payout")

CASH_SYMBOL = "₺"
WHOLE = Decimal("1")
CENTS = Decimal("0.01")

AmountLike = Union[Decimal, int, float, str]


def compute_amount(config: PoolConfiguration) -> Decimal:
    """Return the amount every winner of ``config``'s pool receives.

    When the pool runs at least as many months as it has participants each
    winner collects one full monthly amount. Otherwise everything collected
    over the duration is split evenly across all participants.
    """

    if config.participant_count <= config.duration_months:
        return config.monthly_amount
    return config.monthly_amount * config.duration_months / config.participant_count


def _to_decimal(amount: AmountLike) -> Decimal:
    if isinstance(amount, bool):
        raise FormattingFailure(f"Not an amount: {amount!r}")
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount).strip())
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise FormattingFailure(f"Not an amount: {amount!r}") from exc
    if not value.is_finite():
        raise FormattingFailure(f"Amount is not finite: {amount!r}")
    return value


def _format_localized(amount: AmountLike, item_type: ItemType, language: str) -> str:
    value = _to_decimal(amount)
    whole_units = item_type is ItemType.PRECIOUS_METAL
    try:
        rounded = value.quantize(WHOLE if whole_units else CENTS, rounding=ROUND_HALF_EVEN)
    except InvalidOperation as exc:
        raise FormattingFailure(f"Amount out of range: {amount!r}") from exc
    canonical = format(rounded, ",.0f" if whole_units else ",.2f")
    return apply_separators(canonical, get_locale(language))


def _format_plain(amount: AmountLike) -> str:
    value = _to_decimal(amount)
    return format(value, ".2f")


def _sentinel(item_type: ItemType) -> str:
    return "0" if item_type is ItemType.PRECIOUS_METAL else "0,00"


def format_number(
    amount: AmountLike,
    item_type: ItemType,
    language: str = DEFAULT_LANGUAGE,
) -> str:
    """Render ``amount`` without a unit, degrading instead of raising."""

    try:
        return _format_localized(amount, item_type, language)
    except FormattingFailure as exc:
        logger.warning("Localized formatting failed (%s); using plain format", exc)
    try:
        return _format_plain(amount)
    except FormattingFailure as exc:
        logger.warning("Plain formatting failed (%s); using sentinel", exc)
    return _sentinel(item_type)


def unit_label(item_type: ItemType, specific_item: str = "") -> str:
    if item_type is ItemType.CASH:
        return CASH_SYMBOL
    return specific_item


def format_amount(
    amount: AmountLike,
    item_type: ItemType,
    specific_item: str = "",
    language: str = DEFAULT_LANGUAGE,
) -> str:
    """Format a payout for display, e.g. ``"1,250.00 ₺"`` or ``"3 ALTIN"``.

    Precious metals are counted in whole pieces; cash and currencies always
    show two decimals. The separators follow ``language``.
    """

    number = format_number(amount, item_type, language)
    unit = unit_label(item_type, specific_item)
    return f"{number} {unit}" if unit else number


__all__ = [
    "CASH_SYMBOL",
    "compute_amount",
    "format_amount",
    "format_number",
    "unit_label",
]
