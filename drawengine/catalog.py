from __future__ import annotations

from typing import Dict

from .types import ItemType

GOLD_CODE_TO_NAME: Dict[str, str] = {
    "TEK_ESKI": "Tam Cumhuriyet (Eski)",
    "TEK_YENI": "Tam Cumhuriyet (Yeni)",
    "ATA_ESKI": "Ata (Eski)",
    "ATA_YENI": "Ata (Yeni)",
    "ALTIN": "Gram Altın",
    "CEYREK_ESKI": "Çeyrek (Eski)",
    "CEYREK_YENI": "Çeyrek (Yeni)",
    "YARIM_ESKI": "Yarım (Eski)",
    "YARIM_YENI": "Yarım (Yeni)",
    "AYAR22": "22 Ayar Altın",
    "AYAR14": "14 Ayar Altın",
    "ATA5_ESKI": "5'li Ata (Eski)",
    "ATA5_YENI": "5'li Ata (Yeni)",
    "GREMESE_ESKI": "Gremse Altın(Eski)",
    "GREMESE_YENI": "Gremse Altın(Yeni)",
}

CURRENCY_CODE_TO_NAME: Dict[str, str] = {
    "JPYTRY": "Japon Yeni",
    "CADTRY": "Kanada Doları",
    "SARTRY": "Arabistan Riyali",
    "EURTRY": "Euro",
    "USDTRY": "Dolar",
    "GBPTRY": "Sterlin",
    "CHFTRY": "İsviçre Frangı",
    "NOKTRY": "Norveç Kronu",
    "DKKTRY": "Danimarka Kronu",
    "SEKTRY": "İsveç Kronu",
}


def options_for(item_type: ItemType) -> Dict[str, str]:
    if item_type is ItemType.PRECIOUS_METAL:
        return dict(GOLD_CODE_TO_NAME)
    if item_type is ItemType.FOREIGN_CURRENCY:
        return dict(CURRENCY_CODE_TO_NAME)
    return {}


def describe_item(item_type: ItemType, specific_item: str = "") -> str:
    """Human readable label for a pool's item, e.g. ``"Altın (Gram Altın)"``.

    Codes missing from the catalog are shown as-is.
    """

    if item_type is ItemType.CASH:
        return item_type.display_name
    name = options_for(item_type).get(specific_item, specific_item)
    return f"{item_type.display_name} ({name})"


__all__ = [
    "CURRENCY_CODE_TO_NAME",
    "GOLD_CODE_TO_NAME",
    "describe_item",
    "options_for",
]
