"""ZapQR: multi-format QR code export pipeline."""

__version__ = "0.1.0"
