"""String Format Checkers

Stateless ``(str) -> bool`` predicates. String actions delegate to these
and never inspect anything but the boolean result, so any callable of the
same shape can stand in for one of them.
"""
from __future__ import annotations

import base64
import binascii
import json
import re
from email.utils import parseaddr
from ipaddress import IPv4Address, IPv6Address
from urllib.parse import urlparse
from xml.etree import ElementTree

_UUID = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")
_UUID_VERSIONED = {
    v: re.compile(rf"^[0-9a-f]{{8}}-[0-9a-f]{{4}}-{v}[0-9a-f]{{3}}-[89ab][0-9a-f]{{3}}-[0-9a-f]{{12}}$")
    for v in (1, 3, 4, 5)
}
_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_EVM = re.compile(r"^0x[0-9a-f]{40}$", re.IGNORECASE)
_BITCOIN = re.compile(r"^(bc1[qpzry9x8gf2tvdw0s3jn54khce6mua7l]{39,59}|[13][a-km-zA-HJ-NP-Z1-9]{25,34})$")
_DECIMAL = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)$")
_BASE58 = re.compile(r"^[1-9A-HJ-NP-Za-km-z]+$")
_HEX = re.compile(r"^(?:0[xX])?[0-9a-fA-F]+$")
_HTML = re.compile(
    r"<\/?[a-z][a-z0-9]*(?:\s+[a-z][a-z0-9\-]*(?:\s*=\s*(?:\"[^\"]*\"|'[^']*'|[^\s>]+))?)*\s*\/?>",
    re.IGNORECASE,
)
_PATH = re.compile(r"^(?:[a-zA-Z]:)?[a-zA-Z0-9._\-\/\\:\s~@]+$")
_RGB = re.compile(
    r"^rgba?\(\s*(\d{1,3}%?)\s*[,\s]\s*(\d{1,3}%?)\s*[,\s]\s*(\d{1,3}%?)(?:\s*[,\/]\s*([\d.]+%?))?\s*\)$",
    re.IGNORECASE,
)
_HEX_COLOR = re.compile(r"^#(?:[0-9a-f]{3}|[0-9a-f]{4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_HSL = re.compile(
    r"^hsla?\(\s*(\d{1,3}(?:\.\d+)?(?:deg|rad|turn)?)\s*[,\s]\s*(\d{1,3}(?:\.\d+)?%?)\s*[,\s]\s*"
    r"(\d{1,3}(?:\.\d+)?%?)(?:\s*[,\/]\s*([\d.]+%?))?\s*\)$",
    re.IGNORECASE,
)
_ULID = re.compile(r"^[0-9A-HJKMNP-TV-Z]{26}$")
_DATA_URI = re.compile(
    r"^data:(?:[a-zA-Z0-9]+\/[a-zA-Z0-9\-+.]+)?(?:;[a-zA-Z0-9\-]+=(?:[a-zA-Z0-9\-]+|\"[^\"]*\"))*"
    r"(?:;base64)?,[a-zA-Z0-9+/\-_=%]*$"
)
_DATE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])$")


# ============================================================================
# Identifiers
# ============================================================================

def is_uuid(value: str) -> bool:
    return bool(_UUID.match(value.lower()))


def is_uuid_v1(value: str) -> bool:
    return bool(_UUID_VERSIONED[1].match(value.lower()))


def is_uuid_v3(value: str) -> bool:
    return bool(_UUID_VERSIONED[3].match(value.lower()))


def is_uuid_v4(value: str) -> bool:
    return bool(_UUID_VERSIONED[4].match(value.lower()))


def is_uuid_v5(value: str) -> bool:
    return bool(_UUID_VERSIONED[5].match(value.lower()))


def is_ulid(value: str) -> bool:
    """Crockford base32, 26 characters."""
    return bool(_ULID.match(value))


def is_evm_address(value: str) -> bool:
    return bool(_EVM.match(value))


def is_bitcoin_address(value: str) -> bool:
    """Legacy P2PKH/P2SH and bech32 addresses."""
    return bool(_BITCOIN.match(value))


# ============================================================================
# Network
# ============================================================================

def is_email(value: str) -> bool:
    """Bare ``local@domain.tld`` address; display names are rejected."""
    name, addr = parseaddr(value)
    return bool(addr) and addr == value and bool(_EMAIL.match(value))


def is_url(value: str) -> bool:
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc or parsed.path.startswith("/"))


def is_ipv4(value: str) -> bool:
    try:
        IPv4Address(value)
    except ValueError:
        return False
    return True


def is_ipv6(value: str) -> bool:
    try:
        IPv6Address(value)
    except ValueError:
        return False
    return True


def is_port(value: str) -> bool:
    """Decimal port number in 0-65535."""
    if not value.isascii() or not value.isdigit():
        return False
    return 0 <= int(value) <= 65535


# ============================================================================
# Character classes
# ============================================================================

def is_alpha(value: str) -> bool:
    return all(ch.isalpha() for ch in value)


def is_alphanumeric(value: str) -> bool:
    return all(ch.isalpha() or ch.isdigit() for ch in value)


def is_ascii(value: str) -> bool:
    return value.isascii()


def is_decimal(value: str) -> bool:
    return bool(_DECIMAL.match(value))


def is_hexadecimal(value: str) -> bool:
    return bool(_HEX.match(value))


def is_credit_card(value: str) -> bool:
    """Luhn checksum over 13-19 digits; spaces and hyphens are ignored."""
    cleaned = value.replace(" ", "").replace("-", "")
    if not 13 <= len(cleaned) <= 19 or not (cleaned.isascii() and cleaned.isdigit()):
        return False

    total = 0
    for i, ch in enumerate(cleaned):
        digit = int(ch)
        if (len(cleaned) - i) % 2 == 0:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


# ============================================================================
# Encodings
# ============================================================================

def is_base64(value: str) -> bool:
    try:
        base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        return False
    return True


def is_base32(value: str) -> bool:
    try:
        base64.b32decode(value)
    except (binascii.Error, ValueError):
        return False
    return True


def is_base58(value: str) -> bool:
    return bool(_BASE58.match(value))


def is_data_uri(value: str) -> bool:
    return bool(_DATA_URI.match(value))


# ============================================================================
# Documents
# ============================================================================

def is_json(value: str) -> bool:
    try:
        json.loads(value)
    except ValueError:
        return False
    return True


def is_xml(value: str) -> bool:
    try:
        ElementTree.fromstring(value)
    except ElementTree.ParseError:
        return False
    return True


def is_html(value: str) -> bool:
    """True when the string contains at least one HTML-like tag."""
    return bool(_HTML.search(value))


def is_path(value: str) -> bool:
    return bool(_PATH.match(value))


def is_date(value: str) -> bool:
    """``YYYY-MM-DD`` with month and day in range."""
    return bool(_DATE.match(value))


# ============================================================================
# Colors
# ============================================================================

def is_hex_color(value: str) -> bool:
    return bool(_HEX_COLOR.match(value))


def is_rgb(value: str) -> bool:
    return bool(_RGB.match(value))


def is_hsl(value: str) -> bool:
    return bool(_HSL.match(value))
