"""
Message catalog - Localized validation messages.

Validation rules report stable message ids (e.g. ``username_length``);
this module turns them into human-readable text for the language the
client asked for via ``Accept-Language``.

The catalog is built once at import time and exposed read-only.
"""

import math
from collections.abc import Mapping
from types import MappingProxyType

DEFAULT_LOCALE = "en"

_EN = {
    "username_null": "Username cannot be null",
    "username_length": "Username should have minimum of 4 and maximum of 32 characters",
    "username_invalid": "Username cannot contain control characters",
    "email_null": "Email cannot be null",
    "email_format": "Email is not in valid format",
    "email_inuse": "Email is already in use",
    "password_null": "Password cannot be null",
    "password_length": "Password must be at least 6 characters",
    "password_pattern": (
        "Password should have at least 1 uppercase and lowercase character, and 1 number"
    ),
}

_TR = {
    "username_null": "Kullanıcı adı null olamaz",
    "username_length": "Kullanıcı adı en az 4, en fazla 32 karakterden oluşmalıdır",
    "username_invalid": "Kullanıcı adı kontrol karakterleri içeremez",
    "email_null": "E-posta null olamaz",
    "email_format": "E-posta geçerli biçimde değil",
    "email_inuse": "E-posta zaten kullanılıyor",
    "password_null": "Parola null olamaz",
    "password_length": "Şifre en az 6 karakterden oluşmalıdır",
    "password_pattern": (
        "Parola en az 1 büyük ve küçük harf karakterinden ve 1 rakamdan oluşmalıdır"
    ),
}

MESSAGES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "en": MappingProxyType(_EN),
        "tr": MappingProxyType(_TR),
    }
)

SUPPORTED_LOCALES = frozenset(MESSAGES)


def resolve_locale(accept_language: str | None, default: str = DEFAULT_LOCALE) -> str:
    """
    Pick the best supported locale from an Accept-Language header.

    Honors quality weights (``tr;q=0.5``), matches on the primary subtag
    (``tr-TR`` -> ``tr``) and ignores ranges whose weight is not in (0, 1].
    Falls back to ``default`` when nothing supported is requested.

    Args:
        accept_language: Raw header value, or None if absent
        default: Locale returned when no supported language matches

    Returns:
        A key of MESSAGES
    """
    if not accept_language:
        return default

    candidates: list[tuple[float, int, str]] = []
    for position, item in enumerate(accept_language.split(",")):
        parts = item.strip().split(";")
        tag = parts[0].strip().lower()
        if not tag:
            continue

        quality = 1.0
        for param in parts[1:]:
            name, _, value = param.strip().partition("=")
            if name.strip() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0

        if not (math.isfinite(quality) and 0 < quality <= 1):
            continue
        candidates.append((-quality, position, tag.split("-")[0]))

    # Highest weight first, header order breaks ties
    for _, _, language in sorted(candidates):
        if language in SUPPORTED_LOCALES:
            return language
    return default


def translate(message_id: str, locale: str = DEFAULT_LOCALE) -> str:
    """
    Resolve a message id to text.

    Unknown locales fall back to the default catalog; unknown ids are
    returned unchanged.
    """
    catalog = MESSAGES.get(locale, MESSAGES[DEFAULT_LOCALE])
    if message_id in catalog:
        return catalog[message_id]
    return MESSAGES[DEFAULT_LOCALE].get(message_id, message_id)
