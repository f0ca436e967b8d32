"""Search – case-insensitive substring matching across every locale.

Matching runs against the resolved locale views rather than the raw
``name_<locale>`` fields, so fallback values are searchable too.  There is
no tokenisation, stemming, fuzzy matching or Unicode normalisation.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from catalog_query.application.translation import (
    Locale,
    description_view,
    display_name,
    name_view,
)


def normalize_query(query: object) -> str:
    """Case-folded query text; ``""`` (no search constraint) for blank input.

    Surrounding whitespace is kept: ``"kasumi "`` only matches names that
    contain the trailing space.
    """
    if not isinstance(query, str) or not query.strip():
        return ""
    return query.casefold()


def matches(record: Mapping[str, Any], query: object) -> bool:
    """True when *query* occurs in any locale variant of *record*'s name or description."""
    needle = normalize_query(query)
    if not needle:
        return True
    if any(needle in value.casefold() for value in name_view(record).values()):
        return True
    descriptions = description_view(record)
    if descriptions is None:
        return False
    return any(needle in value.casefold() for value in descriptions.values())


def search(records: Iterable[Mapping[str, Any]], query: object) -> list[Mapping[str, Any]]:
    """Records matching *query*, in input order."""
    return [record for record in records if matches(record, query)]


def suggest(
    records: Iterable[Mapping[str, Any]],
    prefix: str,
    locale: "str | Locale" = Locale.EN,
    limit: int | None = None,
) -> list[str]:
    """Distinct display names in *locale* starting with *prefix*, in input order."""
    needle = prefix.strip().casefold()
    seen: set[str] = set()
    out: list[str] = []
    for record in records:
        name = display_name(record, locale)
        if name.casefold().startswith(needle) and name not in seen:
            seen.add(name)
            out.append(name)
            if limit is not None and len(out) >= limit:
                break
    return out


__all__ = ["matches", "normalize_query", "search", "suggest"]
