"""
Content models for Hikma
"""

from dataclasses import dataclass
from enum import Enum


class Mode(str, Enum):
    """Which kind of content to show"""
    POEMS = "poems"
    QUOTES = "quotes"
    HADITH = "hadith"
    ALL = "all"


# Modes a random pick chooses from
CONCRETE_MODES = (Mode.POEMS, Mode.QUOTES, Mode.HADITH)


@dataclass(frozen=True)
class Content:
    """A single display-ready entry: body text, attribution and category label"""
    text: str
    author: str
    sub: str

    @property
    def is_complete(self) -> bool:
        """True when every field has something worth printing"""
        return all(value.strip() for value in (self.text, self.author, self.sub))

    @property
    def is_hadith(self) -> bool:
        return "Hadith" in self.sub or "حديث" in self.sub
