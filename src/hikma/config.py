"""
Hikma Configuration - إعدادات حكمة
Storage locations, selection tuning and display settings
"""

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

APP_NAME = "hikma"
DB_NAME = "hikma.db"
BUNDLED_ARCHIVE = Path(__file__).parent / "data" / f"{DB_NAME}.gz"


@dataclass(frozen=True)
class StorageConfig:
    """Where the content database lives and where it is installed from"""
    app_name: str = APP_NAME
    db_name: str = DB_NAME
    archive_path: Path = BUNDLED_ARCHIVE


@dataclass(frozen=True)
class SelectionConfig:
    """Random selection settings"""
    max_attempts: int = 3

    # Poem lines this short (after stripping) are treated as blank
    min_line_length: int = 2
    couplet_separator: str = "   ۞   "


@dataclass(frozen=True)
class DisplayConfig:
    """Terminal rendering settings"""
    min_width: int = 40
    max_width: int = 80
    margin: int = 8
    indent: str = "    "

    top_rule: str = "▀"
    bottom_rule: str = "▄"

    # rich style strings
    rule_style: str = "bold bright_yellow"
    text_style: str = "bold bright_cyan"
    hadith_style: str = "bold bright_green"
    attribution_style: str = "bright_black"


# Global config instances
storage_config = StorageConfig()
selection_config = SelectionConfig()
display_config = DisplayConfig()


HADITH_CATEGORY = "hadith"
WISDOM_LABEL = "Wisdom"
HADITH_LABEL = "حديث نبوي"

# Latin transliterations of hadith compilers -> canonical Arabic names
AUTHOR_TRANSLATIONS: Mapping[str, str] = MappingProxyType({
    "Bukhari": "الإمام البخاري",
    "Muslim": "الإمام مسلم",
    "Tirmidhi": "الترمذي",
    "Abu Dawood": "أبو داود",
    "Abudawood": "أبو داود",
    "Ibn Majah": "ابن ماجه",
    "Ibnmajah": "ابن ماجه",
    "Nasai": "النسائي",
    "Malik": "الإمام مالك",
    "Ahmed": "الإمام أحمد",
})
