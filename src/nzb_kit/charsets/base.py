# src/nzb_kit/charsets/base.py

import codecs
from collections.abc import Callable
from dataclasses import dataclass

from nzb_kit.errors import MalformedDocument


@dataclass(frozen=True)
class Decoder:
    """
    Converts raw document bytes to text.

    - strict=False replaces undecodable bytes with U+FFFD
    - strict=True raises MalformedDocument at the first bad byte
    """

    name: str
    strict: bool = False

    def decode(self, data: bytes) -> str:
        errors = "strict" if self.strict else "replace"
        try:
            return codecs.decode(data, self.name, errors)
        except UnicodeDecodeError as exc:
            raise MalformedDocument(
                f"Cannot decode input as {self.name}: {exc.reason}",
                offset=exc.start,
            ) from exc


DecoderFactory = Callable[[bool], Decoder]


def codec_factory(codec_name: str) -> DecoderFactory:
    def factory(strict: bool) -> Decoder:
        return Decoder(name=codec_name, strict=strict)

    return factory
