"""Exception hierarchy for the QR encoder."""

from __future__ import annotations


class QRError(Exception):
    """Base class for every error raised by :mod:`qr_forge`."""


class CapacityExceeded(QRError, ValueError):
    """The payload does not fit the requested version/error-correction level."""


class ConfigurationError(QRError, ValueError):
    """An invalid version, error-correction level, mode or mask was requested."""


class BoundsError(QRError, IndexError):
    """A module coordinate lies outside the symbol."""


class ModelNotBuiltError(BoundsError):
    """The module grid was queried before :meth:`QRModel.make` ran."""


class MalformedPolynomialInput(QRError, TypeError):
    """Polynomial coefficients were not given as a sequence of integers."""


class ArithmeticDomainError(QRError, ValueError):
    """A GF(256) logarithm was requested for a value outside the field's domain."""


class PayloadError(QRError, ValueError):
    """User supplied payload fields failed validation."""
