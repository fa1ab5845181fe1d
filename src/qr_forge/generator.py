"""Payload builders and QR matrix helpers."""

from __future__ import annotations

import re
from typing import List, Optional

from .constants import ErrorCorrectionLevel
from .exceptions import PayloadError
from .model import QRModel

MAX_TEXT_LENGTH = 1000

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_VALID_AUTH = {"WEP", "WPA", "WPA2", "WPA/WPA2", "NOPASS"}


def build_text_payload(text: str, max_length: int = MAX_TEXT_LENGTH) -> str:
    """Return stripped ``text`` after checking it is present and short enough."""
    text = text.strip()
    if not text:
        raise PayloadError("enter some text to encode")
    if len(text) > max_length:
        raise PayloadError(f"input is longer than {max_length} characters")
    return text


def is_valid_email(email: str) -> bool:
    if not email.strip():
        return True
    return _EMAIL_RE.match(email) is not None


def build_vcard_payload(name: str = "", phone: str = "", email: str = "", address: str = "") -> str:
    """Return a vCard 4.0 payload for a contact."""
    name, phone, email, address = (field.strip() for field in (name, phone, email, address))
    if not (name or phone or email or address):
        raise PayloadError("enter at least one piece of contact information")
    if len(name) > 100 or len(phone) > 20 or len(email) > 100 or len(address) > 200:
        raise PayloadError("contact information exceeds the maximum length")
    if not is_valid_email(email):
        raise PayloadError("email must look like name@domain.tld")

    lines = ["BEGIN:VCARD", "VERSION:4.0", f"FN:{name}"]
    if phone:
        lines.append(f"TEL:{phone}")
    if email:
        lines.append(f"EMAIL:{email}")
    if address:
        lines.append(f"ADR:{address}")
    lines.append("END:VCARD")
    return "\n".join(lines)


def build_wifi_payload(ssid: str, password: str = "", auth: Optional[str] = None, hidden: bool = False) -> str:
    """Return the Wi-Fi QR payload string."""
    if not ssid:
        raise PayloadError("the network name (SSID) is required")
    if len(ssid) > 32 or len(password) > 64:
        raise PayloadError("network credentials are too long")
    if auth is None:
        auth_normalized = "WPA" if password.strip() else "nopass"
    else:
        auth_normalized = auth.upper()
        if auth_normalized not in _VALID_AUTH:
            raise PayloadError("auth must be WEP, WPA, WPA2, WPA/WPA2, or nopass")
        if auth_normalized == "NOPASS":
            auth_normalized = "nopass"

    def _escape(value: str) -> str:
        return value.replace("\\", "\\\\").replace(";", r"\;").replace(",", r"\,").replace(":", r"\:")

    escaped_ssid = _escape(ssid)
    escaped_pwd = _escape(password) if auth_normalized != "nopass" else ""
    hidden_flag = "true" if hidden else "false"
    return f"WIFI:S:{escaped_ssid};T:{auth_normalized};P:{escaped_pwd};H:{hidden_flag};;"


def matrix_from_text(
    text: str,
    ecc: ErrorCorrectionLevel | str = ErrorCorrectionLevel.H,
    border: int = 4,
    min_version: Optional[int] = None,
) -> List[List[bool]]:
    """Encode ``text`` into a matrix of booleans representing the QR code."""
    qr = QRModel.encode_text(text, ecc, min_version=min_version)
    return add_border(qr.get_matrix(), border)


def add_border(matrix: List[List[bool]], border: int) -> List[List[bool]]:
    if border <= 0:
        return [row[:] for row in matrix]
    size = len(matrix)
    new_size = size + border * 2
    result = [[False] * new_size for _ in range(new_size)]
    for y, row in enumerate(matrix):
        for x, value in enumerate(row):
            result[y + border][x + border] = value
    return result
