"""Locale-suffixed key folding.

Localizable keys appear in a section once per translation::

    Name=Foo Viewer
    Name[de]=Foo Betrachter
    Name[sr@latin]=Foo Pregledač

extract_localized() collapses these into one locale map keyed by tag
(``""`` for the unsuffixed default) and removes them from the raw section
mapping; fold_localized() expands a locale map back into raw keys.

A key matches a prefix only when it equals the prefix or is the prefix
immediately followed by a bracketed, non-empty tag, so ``Name`` never
captures ``GenericName`` or ``NameX``.
"""

import os
import re

from rmenu.constants import (
    DEFAULT_LOCALE_TAG,
    LOCALE_CLOSE,
    LOCALE_ENV_VARS,
    LOCALE_OPEN,
)

LocaleMap = dict[str, str]

# lang_COUNTRY.ENCODING@MODIFIER, every part but lang optional
_LOCALE_RE = re.compile(
    r"^(?P<lang>[^_.@]+)"
    r"(?:_(?P<country>[^.@]+))?"
    r"(?:\.(?P<encoding>[^@]+))?"
    r"(?:@(?P<modifier>.+))?$"
)


def locale_key(prefix: str, locale: str) -> str:
    """Build the raw key for a prefix and locale tag."""
    if locale == DEFAULT_LOCALE_TAG:
        return prefix
    return f"{prefix}{LOCALE_OPEN}{locale}{LOCALE_CLOSE}"


def split_locale_key(prefix: str, key: str) -> str | None:
    """Return the locale tag of key under prefix, or None if no match.

    >>> split_locale_key("Name", "Name[de]")
    'de'
    >>> split_locale_key("Name", "Name") == ""
    True
    >>> split_locale_key("Name", "GenericName") is None
    True
    """
    if key == prefix:
        return DEFAULT_LOCALE_TAG
    opening = prefix + LOCALE_OPEN
    if (
        key.startswith(opening)
        and key.endswith(LOCALE_CLOSE)
        and len(key) > len(opening) + len(LOCALE_CLOSE)
    ):
        return key[len(opening) : -len(LOCALE_CLOSE)]
    return None


def extract_localized(prefix: str, raw: dict[str, str]) -> LocaleMap | None:
    """Remove every variant of prefix from raw and return them by locale.

    Args:
        prefix: Field key without locale suffix, e.g. ``Name``
        raw: Section key/value mapping; matching keys are removed

    Returns:
        Locale map in lexical tag order, or None when no key matched

    """
    matches: list[tuple[str, str]] = []
    for key in raw:
        locale = split_locale_key(prefix, key)
        if locale is not None:
            matches.append((locale, key))

    if not matches:
        return None

    return {locale: raw.pop(key) for locale, key in sorted(matches)}


def fold_localized(
    prefix: str, locale_map: LocaleMap
) -> list[tuple[str, str]]:
    """Expand a locale map into raw ``(key, value)`` pairs in map order."""
    return [
        (locale_key(prefix, locale), value)
        for locale, value in locale_map.items()
    ]


def locale_candidates(locale: str) -> list[str]:
    """Return lookup tags for a POSIX locale in freedesktop match order.

    >>> locale_candidates("sr_YU.UTF-8@Latn")
    ['sr_YU@Latn', 'sr_YU', 'sr@Latn', 'sr']
    """
    match = _LOCALE_RE.match(locale)
    if match is None:
        return []

    lang = match.group("lang")
    country = match.group("country")
    modifier = match.group("modifier")

    candidates = []
    if country and modifier:
        candidates.append(f"{lang}_{country}@{modifier}")
    if country:
        candidates.append(f"{lang}_{country}")
    if modifier:
        candidates.append(f"{lang}@{modifier}")
    candidates.append(lang)
    return candidates


def current_locale() -> str | None:
    """Return the message locale from the environment, if any."""
    for var in LOCALE_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return value
    return None


def resolve_localized(
    locale_map: LocaleMap | None, locale: str | None = None
) -> str | None:
    """Pick the best translation for locale from a locale map.

    Args:
        locale_map: Locale map as produced by extract_localized()
        locale: POSIX locale such as ``de_DE.UTF-8``; defaults to the
            process locale from LC_ALL, LC_MESSAGES or LANG

    Returns:
        The matching value, the default variant, or None

    """
    if not locale_map:
        return None
    if locale is None:
        locale = current_locale()
    if locale and locale not in ("C", "POSIX"):
        for tag in locale_candidates(locale):
            if tag in locale_map:
                return locale_map[tag]
    return locale_map.get(DEFAULT_LOCALE_TAG)
