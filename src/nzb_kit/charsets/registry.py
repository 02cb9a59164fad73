# src/nzb_kit/charsets/registry.py

import codecs
import logging
import re

from nzb_kit.errors import UnsupportedEncoding

from .base import Decoder, DecoderFactory, codec_factory

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"

_XML_DECLARATION = re.compile(
    rb"""^<\?xml\s[^>]*?\bencoding\s*=\s*["']([A-Za-z][A-Za-z0-9._\-]*)["']"""
)

# UTF-32 marks must be checked before UTF-16, they share a prefix
_BOMS = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


def normalize_name(name: str) -> str:
    return name.strip().lower().replace("_", "-")


def sniff_encoding(data: bytes) -> str | None:
    """
    Detect the encoding of an XML document from its first bytes.

    A byte order mark wins over the prolog. Returns None when the document
    declares nothing, in which case the caller should use its default.
    """
    for bom, name in _BOMS:
        if data.startswith(bom):
            return name

    match = _XML_DECLARATION.match(data[:1024])
    if match is None:
        return None
    return match.group(1).decode("ascii")


class CharsetRegistry:
    """
    Table from encoding names to decoder factories.

    Names are resolved against explicitly registered entries first, then
    against Python's codec registry. Anything else falls back to the
    default entry unless strict resolution is requested.
    """

    def __init__(self, default_encoding: str = DEFAULT_ENCODING) -> None:
        self._factories: dict[str, DecoderFactory] = {}

        default = normalize_name(default_encoding)
        factory = self._lookup_codec(default)
        if factory is None:
            raise ValueError(f"Unknown default encoding: {default_encoding}")

        self._default_name = default
        self._factories[default] = factory

    @property
    def default_encoding(self) -> str:
        return self._default_name

    def register(self, name: str, factory: DecoderFactory) -> None:
        key = normalize_name(name)
        if key in self._factories:
            raise ValueError(f"Encoding '{key}' already registered")

        self._factories[key] = factory
        logger.debug("Registered encoding: %s", key)

    def names(self) -> list[str]:
        return list(self._factories)

    def is_supported(self, name: str) -> bool:
        return self._lookup(normalize_name(name)) is not None

    def resolve(self, declared_name: str | None, *, strict: bool = False) -> Decoder:
        if declared_name and declared_name.strip():
            factory = self._lookup(normalize_name(declared_name))
            if factory is not None:
                return factory(strict)

            if strict:
                raise UnsupportedEncoding(declared_name)
            logger.debug(
                "Unknown encoding %r, falling back to %s",
                declared_name,
                self._default_name,
            )

        return self._factories[self._default_name](strict)

    def _lookup(self, key: str) -> DecoderFactory | None:
        factory = self._factories.get(key)
        if factory is not None:
            return factory
        return self._lookup_codec(key)

    @staticmethod
    def _lookup_codec(key: str) -> DecoderFactory | None:
        try:
            info = codecs.lookup(key)
        except LookupError:
            return None

        # bytes-to-bytes codecs such as base64 or rot13 are not charsets
        if not getattr(info, "_is_text_encoding", True):
            return None
        return codec_factory(info.name)


default_registry = CharsetRegistry()


def resolve(declared_name: str | None, *, strict: bool = False) -> Decoder:
    return default_registry.resolve(declared_name, strict=strict)
