"""Config settings – QuerySettings for the catalog query engine."""
from __future__ import annotations

import dataclasses
import logging

from catalog_query.config.settings.base import Settings
from catalog_query.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class QuerySettings(Settings):
    """Engine defaults, overridable through ``CATALOG_QUERY_*`` variables.

    The list pages of the catalog browser show eight cards per page and
    debounce the search box by half a second.
    """

    _prefix: dataclasses.ClassVar[str] = "CATALOG_QUERY"

    default_page_size: int = 8
    max_page_size: int = 200
    search_debounce_ms: int = 500
    search_key: str = "search"
    unknown_label: str = "Unknown"
    log_level: str = "INFO"
    log_json: bool = False

    def _validate(self) -> None:
        if self.default_page_size <= 0:
            raise InvalidSettingValueError("default_page_size", self.default_page_size, "must be > 0")
        if self.max_page_size < self.default_page_size:
            raise InvalidSettingValueError(
                "max_page_size", self.max_page_size, "must be >= default_page_size"
            )
        if self.search_debounce_ms < 0:
            raise InvalidSettingValueError("search_debounce_ms", self.search_debounce_ms, "must be >= 0")
        if not self.search_key:
            raise InvalidSettingValueError("search_key", self.search_key, "must not be empty")
        if not self.unknown_label.strip():
            raise InvalidSettingValueError("unknown_label", self.unknown_label, "must not be blank")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["QuerySettings"]
