"""Application translation – locale fallback views for catalog records."""
from catalog_query.application.translation.augmenter import (
    DESCRIPTION_TRANSLATIONS_KEY,
    TRANSLATIONS_KEY,
    UNKNOWN,
    LocaleView,
    augment,
    augment_all,
    description_view,
    display_description,
    display_name,
    name_view,
    resolve_locale_view,
)
from catalog_query.application.translation.locales import FALLBACK_LOCALE, LOCALES, Locale

__all__ = [
    "DESCRIPTION_TRANSLATIONS_KEY",
    "FALLBACK_LOCALE",
    "LOCALES",
    "TRANSLATIONS_KEY",
    "UNKNOWN",
    "Locale",
    "LocaleView",
    "augment",
    "augment_all",
    "description_view",
    "display_description",
    "display_name",
    "name_view",
    "resolve_locale_view",
]
