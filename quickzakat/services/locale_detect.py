"""Default currency detection from the user's locale and timezone.

Detection is an ordered chain of pure functions over a UserEnvironment.
Each detector returns a currency code or None; the first code wins. The
last detector always answers, so detection never fails.

Runs once per page session, before the first calculation.
"""
import logging
import os
import re
from dataclasses import dataclass, field
from typing import Callable, Optional

from quickzakat.data.currencies import FALLBACK_CURRENCY, resolve_currency
from quickzakat.data.regions import (
    EURO_REGION_CODES,
    LIKELY_REGIONS,
    REGION_TO_CURRENCY,
    TIMEZONE_PREFIXES,
    TIMEZONE_TO_CURRENCY,
)

logger = logging.getLogger(__name__)

# POSIX locale variables, highest priority first
LOCALE_ENV_VARS = ('LANGUAGE', 'LC_ALL', 'LC_MESSAGES', 'LANG')

_LANGUAGE = re.compile(r'^[a-z]{2,3}$', re.IGNORECASE)
_SCRIPT = re.compile(r'^[a-z]{4}$', re.IGNORECASE)
_REGION = re.compile(r'^(?:[a-z]{2}|\d{3})$', re.IGNORECASE)
_LOOSE_REGION = re.compile(r'-([a-z]{2})\b', re.IGNORECASE)


@dataclass(frozen=True)
class UserEnvironment:
    """Locale preferences (highest priority first) and IANA timezone."""
    locales: tuple[str, ...] = field(default_factory=tuple)
    timezone: Optional[str] = None


def normalize_locale_tag(tag: str) -> str:
    """Turn POSIX or BCP 47 locale strings into hyphenated BCP 47 form.

    'en_GB.UTF-8' -> 'en-GB', 'ur_PK@latin' -> 'ur-PK'.
    """
    tag = tag.strip().split('.', 1)[0].split('@', 1)[0]
    return tag.replace('_', '-')


def region_from_locale(locale: Optional[str]) -> Optional[str]:
    """Get the upper-case region for a locale tag, or None.

    A region subtag is used directly. A bare language is expanded to its
    likely region ('ur' -> 'PK'). Tags that cannot be parsed are searched
    for a '-xx' pattern as a last resort.
    """
    if not locale or not isinstance(locale, str):
        return None

    tag = normalize_locale_tag(locale)
    if tag in ('C', 'POSIX', '*'):
        return None

    subtags = tag.split('-')
    if _LANGUAGE.match(subtags[0]):
        rest = subtags[1:]
        if rest and _SCRIPT.match(rest[0]):
            rest = rest[1:]
        if rest and _REGION.match(rest[0]):
            region = rest[0].upper()
            # Numeric UN M.49 areas (e.g. es-419) name no single country
            return region if region.isalpha() else None
        if not rest:
            return LIKELY_REGIONS.get(subtags[0].lower())

    logger.debug(f"Could not parse locale tag {locale!r}, trying loose match")
    matched = _LOOSE_REGION.search(tag)
    return matched.group(1).upper() if matched else None


def currency_from_region(region: Optional[str]) -> Optional[str]:
    if not region:
        return None
    if region in REGION_TO_CURRENCY:
        return REGION_TO_CURRENCY[region]
    if region in EURO_REGION_CODES:
        return 'EUR'
    return None


def currency_from_locales(env: UserEnvironment) -> Optional[str]:
    """First locale whose region maps to a currency decides."""
    for locale in env.locales:
        currency = currency_from_region(region_from_locale(locale))
        if currency:
            return currency
    return None


def currency_from_timezone(env: UserEnvironment) -> Optional[str]:
    zone = env.timezone or ''
    if zone in TIMEZONE_TO_CURRENCY:
        return TIMEZONE_TO_CURRENCY[zone]
    for prefix, currency in TIMEZONE_PREFIXES:
        if zone.startswith(prefix):
            return currency
    return None


def fallback_currency(env: UserEnvironment) -> Optional[str]:
    return FALLBACK_CURRENCY


Detector = Callable[[UserEnvironment], Optional[str]]

CURRENCY_DETECTORS: list[Detector] = [
    currency_from_locales,
    currency_from_timezone,
    fallback_currency,
]


def detect_currency(env: UserEnvironment, detectors: Optional[list[Detector]] = None) -> str:
    """Run the detector chain; the first non-empty answer wins."""
    for detector in detectors if detectors is not None else CURRENCY_DETECTORS:
        currency = detector(env)
        if currency:
            logger.debug(f"Currency {currency} detected by {detector.__name__}")
            return currency
    return FALLBACK_CURRENCY


def initial_currency(env: UserEnvironment, enabled: Optional[list[str]] = None) -> str:
    """Detected currency, or USD when it is not among the offered options."""
    detected = detect_currency(env)
    currency = resolve_currency(detected, enabled)
    if currency != detected:
        logger.info(f"Detected currency {detected} is not offered, using {currency}")
    return currency


def environment_from_os(environ=None, default_timezone: Optional[str] = None) -> UserEnvironment:
    """Build a UserEnvironment from POSIX locale variables and TZ."""
    if environ is None:
        environ = os.environ
    locales = []
    for name in LOCALE_ENV_VARS:
        value = environ.get(name, '')
        # LANGUAGE holds a colon-separated priority list
        for part in value.split(':'):
            part = part.strip()
            if part and part not in locales:
                locales.append(part)
    timezone = environ.get('TZ', '').lstrip(':') or default_timezone
    return UserEnvironment(locales=tuple(locales), timezone=timezone)
