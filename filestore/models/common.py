from __future__ import annotations
from enum import Enum
from typing import Optional

class LanguageCode(str, Enum):
    DE = "DE"
    EN = "EN"
    FR = "FR"
    IT = "IT"
    ES = "ES"
    PT = "PT"
    NL = "NL"
    RM = "RM"

    @classmethod
    def default(cls) -> "LanguageCode":
        return cls.EN

    @classmethod
    def parse(cls, tag: Optional[str]) -> Optional["LanguageCode"]:
        """Return the matching code, or None for empty / unknown tags."""
        if tag is None:
            return None
        key = tag.strip().upper()
        if not key:
            return None
        try:
            return cls(key)
        except ValueError:
            return None
