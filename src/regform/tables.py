"""Static lookup tables used by the email and country rules.

Everything here is immutable and built once at import time. Policies
reference these tables by default; pass your own sets or mappings to
``ValidatorPolicy`` to swap them out.
"""

from collections.abc import Mapping
from types import MappingProxyType

# ---------------------------------------------------------------------------
# Top-level domains
# ---------------------------------------------------------------------------

# Compact list: generic TLDs, the main Latin American and European
# country codes, and the popular new gTLDs.
COMMON_TLDS: frozenset[str] = frozenset({
    "com", "org", "net", "edu", "gov", "mil", "int",
    "br", "ar", "cl", "mx", "es", "pt", "fr", "de", "it", "uk", "ca", "au", "jp", "kr",
    "info", "biz", "name", "pro", "coop", "museum", "aero", "jobs", "travel", "mobi",
    "io", "ai", "co", "app", "dev", "xyz", "online", "store", "tech", "site", "cloud",
})

_GENERIC_TLDS = frozenset({
    "com", "org", "net", "edu", "gov", "mil", "int", "info", "biz", "name", "pro",
    "coop", "aero", "museum", "jobs", "mobi", "travel", "cat", "post", "tel", "asia",
    "xxx",
})

_COUNTRY_TLDS = frozenset({
    # Americas
    "mx", "co", "ar", "cl", "pe", "br", "us", "ca", "pr", "gu", "vi", "vg", "um",
    "tc", "ky", "bm", "ag", "lc", "vc", "gd", "dm", "bb", "bz", "cr", "sv", "gt",
    "hn", "ni", "pa", "py", "uy", "bo", "ec", "ve", "sr", "gy", "gf", "aw", "mq",
    "gp", "ht", "do", "cu", "jm", "bs", "tt", "kn", "pm",
    # Europe
    "es", "de", "fr", "it", "uk", "ru", "tr", "pl", "nl", "se", "ch", "at", "be",
    "dk", "fi", "no", "pt", "gr", "ie", "cz", "hu", "ro", "sk", "si", "hr", "bg",
    "rs", "ua", "by",
    # Asia and the Middle East
    "jp", "kr", "cn", "in", "sg", "ae", "sa", "kz", "uz", "vn", "th", "ph", "my",
    "id", "bd", "pk", "lk", "np", "mm", "kh", "la", "bn", "tl",
    # Africa
    "za", "re", "yt", "sh", "ac", "ta",
    # Oceania and territories
    "au", "nz", "pg", "sb", "vu", "fj", "to", "ws", "ki", "fm", "pw", "mh", "nr",
    "tv", "cc", "cx", "gs", "tk", "nu", "nf", "wf", "io", "mp", "as",
})

# Extended list: generic TLDs plus a broad set of country codes.
EXTENDED_TLDS: frozenset[str] = _GENERIC_TLDS | _COUNTRY_TLDS

# ---------------------------------------------------------------------------
# Email providers
# ---------------------------------------------------------------------------

COMMON_EMAIL_DOMAINS: frozenset[str] = frozenset({
    "gmail.com",
    "hotmail.com",
    "outlook.com",
    "yahoo.com",
    "icloud.com",
    "live.com",
    "aol.com",
    "protonmail.com",
    "zoho.com",
    "mail.com",
    "gmx.com",
    "yandex.com",
    "terra.com",
    "bol.com.br",
    "uol.com.br",
    "ig.com.br",
    "terra.com.br",
})

# Misspelled domain -> the domain the user most likely meant.
TYPO_DOMAINS: Mapping[str, str] = MappingProxyType({
    "gmial.com": "gmail.com",
    "gamil.com": "gmail.com",
    "gmail.con": "gmail.com",
    "gmail.co": "gmail.com",
    "hotnail.com": "hotmail.com",
    "hotnail.con": "hotmail.com",
    "hotmal.com": "hotmail.com",
    "outloook.com": "outlook.com",
    "yaho.com": "yahoo.com",
    "yaho.com.br": "yahoo.com.br",
    "uol.com": "uol.com.br",
    "ig.com": "ig.com.br",
})

# ---------------------------------------------------------------------------
# Countries
# ---------------------------------------------------------------------------

COUNTRIES: tuple[str, ...] = (
    "México",
    "España",
    "Colombia",
    "Argentina",
    "Chile",
    "Perú",
    "Brasil",
    "Estados Unidos",
    "Canadá",
    "Alemania",
    "Francia",
    "Italia",
    "Reino Unido",
    "Japón",
    "Corea del Sur",
    "Australia",
)
