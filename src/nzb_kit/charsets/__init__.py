from .base import Decoder, DecoderFactory
from .registry import (
    DEFAULT_ENCODING,
    CharsetRegistry,
    default_registry,
    resolve,
    sniff_encoding,
)

__all__ = [
    "DEFAULT_ENCODING",
    "CharsetRegistry",
    "Decoder",
    "DecoderFactory",
    "default_registry",
    "resolve",
    "sniff_encoding",
]
