"""Locale tables used to render amounts and month labels."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Tuple

logger = logging.getLogger("goldpool.locales")

DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class LocaleFormat:
    code: str
    decimal_separator: str
    group_separator: str
    month_names: Tuple[str, ...]

    def month_name(self, month: int) -> str:
        if not 1 <= month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {month}")
        return self.month_names[month - 1]


LOCALES: Dict[str, LocaleFormat] = {
    "en": LocaleFormat(
        code="en",
        decimal_separator=".",
        group_separator=",",
        month_names=(
            "January",
            "February",
            "March",
            "April",
            "May",
            "June",
            "July",
            "August",
            "September",
            "October",
            "November",
            "December",
        ),
    ),
    "tr": LocaleFormat(
        code="tr",
        decimal_separator=",",
        group_separator=".",
        month_names=(
            "Ocak",
            "Şubat",
            "Mart",
            "Nisan",
            "Mayıs",
            "Haziran",
            "Temmuz",
            "Ağustos",
            "Eylül",
            "Ekim",
            "Kasım",
            "Aralık",
        ),
    ),
}


def get_locale(language: str) -> LocaleFormat:
    """Return the table for ``language``; unknown codes fall back to English.

    Region suffixes are ignored, so ``"tr-TR"`` and ``"tr_TR"`` both map to
    ``"tr"``.
    """

    code = (language or DEFAULT_LANGUAGE).replace("_", "-").split("-")[0].lower()
    locale = LOCALES.get(code)
    if locale is None:
        logger.warning("Unsupported language %r; using %s", language, DEFAULT_LANGUAGE)
        return LOCALES[DEFAULT_LANGUAGE]
    return locale


def format_month_label(year: int, month: int, language: str = DEFAULT_LANGUAGE) -> str:
    return f"{get_locale(language).month_name(month)} {year:04d}"


def apply_separators(canonical: str, locale: LocaleFormat) -> str:
    """Swap the separators of a ``1,234.56`` style string for ``locale``'s."""

    if locale.group_separator == "," and locale.decimal_separator == ".":
        return canonical
    table = str.maketrans({",": locale.group_separator, ".": locale.decimal_separator})
    return canonical.translate(table)


__all__ = [
    "DEFAULT_LANGUAGE",
    "LOCALES",
    "LocaleFormat",
    "apply_separators",
    "format_month_label",
    "get_locale",
]
