"""Host image codec implementations."""

from .qt_codec import QtImageCodec

__all__ = ["QtImageCodec"]
