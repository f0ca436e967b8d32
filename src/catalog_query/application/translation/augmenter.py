"""Translation – locale-fallback views attached to catalog records.

Every record carries ``name_<locale>`` (and optionally
``description_<locale>``) fields for the closed locale set.  For each locale
the display string resolves, in order, to:

1. the locale's own field,
2. the ``en`` field,
3. the first non-empty field in ``jp, en, cn, tw, kr`` order,
4. the literal ``"Unknown"``.

Resolution never raises on malformed records; it only substitutes.
"""
from __future__ import annotations

from typing import Any, Iterable, Iterator, Mapping

from catalog_query.application.translation.locales import FALLBACK_LOCALE, LOCALES, Locale

UNKNOWN = "Unknown"
TRANSLATIONS_KEY = "translations"
DESCRIPTION_TRANSLATIONS_KEY = "description_translations"


class LocaleView(Mapping[str, str]):
    """Immutable locale → display string mapping.

    Keys are locale codes; both ``"en"`` and ``Locale.EN`` look up the same
    entry.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str]) -> None:
        self._values: dict[str, str] = {Locale.parse(k).value: v for k, v in values.items()}

    def __getitem__(self, key: str) -> str:
        try:
            return self._values[Locale.parse(key).value]
        except ValueError:
            raise KeyError(key) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self._values.items())))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return dict(self.items()) == dict(other.items())
        return NotImplemented

    def __repr__(self) -> str:
        return f"LocaleView({self._values!r})"


def _text(record: Mapping[str, Any], field: str) -> str | None:
    value = record.get(field)
    if isinstance(value, str) and value.strip():
        return value
    return None


def resolve_locale_view(
    record: Mapping[str, Any],
    prefix: str = "name",
    *,
    unknown: str | None = UNKNOWN,
) -> LocaleView | None:
    """Resolve ``<prefix>_<locale>`` fields of *record* into a :class:`LocaleView`.

    When no locale field holds text, every locale maps to *unknown*; pass
    ``unknown=None`` to get ``None`` in that case instead.
    """
    raw = {locale: _text(record, locale.field(prefix)) for locale in LOCALES}
    first = next((value for value in raw.values() if value is not None), None)
    if first is None and unknown is None:
        return None
    english = raw[FALLBACK_LOCALE]
    resolved = {
        locale.value: raw[locale] or english or first or unknown
        for locale in LOCALES
    }
    return LocaleView(resolved)  # type: ignore[arg-type]


def augment(record: Mapping[str, Any], *, unknown: str = UNKNOWN) -> dict[str, Any]:
    """Return a new dict of *record*'s fields plus its translation views.

    ``translations`` holds the resolved names; ``description_translations``
    the resolved descriptions, or ``None`` when the record has none.
    """
    augmented = dict(record)
    augmented[TRANSLATIONS_KEY] = resolve_locale_view(record, "name", unknown=unknown)
    augmented[DESCRIPTION_TRANSLATIONS_KEY] = resolve_locale_view(record, "description", unknown=None)
    return augmented


def augment_all(records: Iterable[Mapping[str, Any]], *, unknown: str = UNKNOWN) -> list[dict[str, Any]]:
    return [augment(record, unknown=unknown) for record in records]


def name_view(record: Mapping[str, Any]) -> LocaleView:
    """The record's attached name view, resolving one when it is absent."""
    view = record.get(TRANSLATIONS_KEY)
    if isinstance(view, LocaleView):
        return view
    return resolve_locale_view(record, "name")  # type: ignore[return-value]


def description_view(record: Mapping[str, Any]) -> LocaleView | None:
    view = record.get(DESCRIPTION_TRANSLATIONS_KEY)
    if isinstance(view, LocaleView):
        return view
    return resolve_locale_view(record, "description", unknown=None)


def display_name(record: Mapping[str, Any], locale: "str | Locale" = Locale.EN) -> str:
    """Display name of *record* in *locale*."""
    return name_view(record)[Locale.parse(locale)]


def display_description(record: Mapping[str, Any], locale: "str | Locale" = Locale.EN) -> str | None:
    view = description_view(record)
    if view is None:
        return None
    return view[Locale.parse(locale)]


__all__ = [
    "DESCRIPTION_TRANSLATIONS_KEY",
    "TRANSLATIONS_KEY",
    "UNKNOWN",
    "LocaleView",
    "augment",
    "augment_all",
    "description_view",
    "display_description",
    "display_name",
    "name_view",
    "resolve_locale_view",
]
