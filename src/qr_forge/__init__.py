"""Byte-mode QR Code encoder with payload builders and renderers."""

from .constants import ErrorCorrectionLevel
from .exceptions import (
    BoundsError,
    CapacityExceeded,
    ConfigurationError,
    MalformedPolynomialInput,
    ModelNotBuiltError,
    PayloadError,
    QRError,
)
from .generator import (
    build_text_payload,
    build_vcard_payload,
    build_wifi_payload,
    matrix_from_text,
)
from .model import QRModel
from .render import render_image, render_svg, render_text, save
from .version import select_version

__version__ = "0.1.0"

__all__ = [
    "BoundsError",
    "CapacityExceeded",
    "ConfigurationError",
    "ErrorCorrectionLevel",
    "MalformedPolynomialInput",
    "ModelNotBuiltError",
    "PayloadError",
    "QRError",
    "QRModel",
    "build_text_payload",
    "build_vcard_payload",
    "build_wifi_payload",
    "matrix_from_text",
    "render_image",
    "render_svg",
    "render_text",
    "save",
    "select_version",
]
