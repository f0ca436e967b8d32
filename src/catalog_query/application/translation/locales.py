"""Translation – the closed locale set and its enumeration order."""
from __future__ import annotations

from enum import Enum


class Locale(str, Enum):
    """Catalog display languages, in fallback enumeration order."""

    JP = "jp"
    EN = "en"
    CN = "cn"
    TW = "tw"
    KR = "kr"

    @classmethod
    def parse(cls, code: "str | Locale") -> "Locale":
        """Parse a locale code case-insensitively.

        Accepts the upper-case codes of the language picker (``EN``, ``JP``)
        and its ``KO`` spelling for Korean.
        """
        if isinstance(code, Locale):
            return code
        normalized = str(code).strip().lower()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"unknown locale {code!r}; expected one of {[loc.value for loc in cls]}") from None

    def field(self, prefix: str = "name") -> str:
        """Record field holding this locale's text, e.g. ``name_jp``."""
        return f"{prefix}_{self.value}"


_ALIASES = {"ko": "kr", "ja": "jp", "zh": "cn"}

LOCALES: tuple[Locale, ...] = tuple(Locale)
FALLBACK_LOCALE = Locale.EN

__all__ = ["FALLBACK_LOCALE", "LOCALES", "Locale"]
