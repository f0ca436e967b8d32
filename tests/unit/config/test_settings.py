"""Unit tests for config settings, loaders and QuerySettings."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

import pytest

from catalog_query.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    QuerySettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from catalog_query.config.validation import (
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


@dataclass
class PageSettings(Settings):
    _prefix: ClassVar[str] = "PAGE"

    title: str = "Characters"
    size: int = 8
    compact: bool = False
    ratio: float = 1.0
    tags: list[str] = field(default_factory=list)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    endpoint: str


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_when_unset(self) -> None:
        settings = EnvSettingsLoader().load(PageSettings)
        assert settings.title == "Characters"
        assert settings.size == 8

    def test_loads_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAGE_SIZE", "24")
        assert EnvSettingsLoader().load(PageSettings).size == 24

    def test_loads_float(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAGE_RATIO", "1.5")
        assert EnvSettingsLoader().load(PageSettings).ratio == 1.5

    def test_loads_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for truthy in ("true", "True", "1", "yes", "on"):
            monkeypatch.setenv("PAGE_COMPACT", truthy)
            assert EnvSettingsLoader().load(PageSettings).compact is True
        for falsy in ("false", "0", "no", "off"):
            monkeypatch.setenv("PAGE_COMPACT", falsy)
            assert EnvSettingsLoader().load(PageSettings).compact is False

    def test_loads_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAGE_TAGS", "ssr, sr ,,r")
        assert EnvSettingsLoader().load(PageSettings).tags == ["ssr", "sr", "r"]

    def test_bad_int_is_invalid_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAGE_SIZE", "eight")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(PageSettings)
        assert exc_info.value.setting_name == "PAGE_SIZE"

    def test_bad_bool_is_invalid_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAGE_COMPACT", "maybe")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(PageSettings)

    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REQ_ENDPOINT", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_ENDPOINT"


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PAGE_TITLE", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("PAGE_TITLE=Swimsuits\n", encoding="utf-8")
        settings = DotenvSettingsLoader(str(env_file)).load(PageSettings)
        assert settings.title == "Swimsuits"
        monkeypatch.delenv("PAGE_TITLE", raising=False)


# ---------------------------------------------------------------------------
# SettingsFactory
# ---------------------------------------------------------------------------


class _StaticLoader(SettingsLoader):
    def __init__(self, **values: object) -> None:
        self._values = values

    def load(self, settings_class):  # type: ignore[override]
        return settings_class(**self._values)


class _BrokenLoader(SettingsLoader):
    def load(self, settings_class):  # type: ignore[override]
        raise ConfigurationError("unavailable")


class TestSettingsFactory:
    def test_later_loader_wins(self) -> None:
        settings = SettingsFactory.create(
            PageSettings, [_StaticLoader(size=10), _StaticLoader(size=20)]
        )
        assert settings.size == 20

    def test_overrides_win(self) -> None:
        settings = SettingsFactory.create(PageSettings, [_StaticLoader(size=10)], overrides={"size": 4})
        assert settings.size == 4

    def test_failing_loader_is_skipped(self) -> None:
        settings = SettingsFactory.create(PageSettings, [_BrokenLoader(), _StaticLoader(title="Items")])
        assert settings.title == "Items"

    def test_missing_required_after_merge(self) -> None:
        with pytest.raises(MissingRequiredSettingError):
            SettingsFactory.create(RequiredSettings, [])

    def test_bad_override_wrapped(self) -> None:
        with pytest.raises(ConfigurationError):
            SettingsFactory.create(PageSettings, overrides={"unknown_field": 1})


# ---------------------------------------------------------------------------
# QuerySettings
# ---------------------------------------------------------------------------


class TestQuerySettings:
    def test_defaults(self) -> None:
        settings = QuerySettings()
        assert settings.default_page_size == 8
        assert settings.search_debounce_ms == 500
        assert settings.search_key == "search"
        assert settings.unknown_label == "Unknown"

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CATALOG_QUERY_DEFAULT_PAGE_SIZE", "12")
        monkeypatch.setenv("CATALOG_QUERY_LOG_JSON", "true")
        settings = EnvSettingsLoader().load(QuerySettings)
        assert settings.default_page_size == 12
        assert settings.log_json is True

    @pytest.mark.parametrize(
        "overrides",
        [
            {"default_page_size": 0},
            {"default_page_size": 50, "max_page_size": 10},
            {"search_debounce_ms": -1},
            {"search_key": ""},
            {"unknown_label": "  "},
            {"log_level": "LOUD"},
        ],
    )
    def test_invalid_values(self, overrides: dict) -> None:
        with pytest.raises(InvalidSettingValueError):
            QuerySettings(**overrides)

    def test_log_level_value(self) -> None:
        assert QuerySettings(log_level="debug").log_level_value == 10
