# src/nzb_kit/api.py

"""Module-level entry points using a default-configured parser."""

from pathlib import Path
from typing import BinaryIO

from .parsers.config import ParserConfig
from .parsers.models import Nzb
from .parsers.nzb_parser import NzbParser


def parse_from_bytes(
    source: bytes | BinaryIO, config: ParserConfig = ParserConfig()
) -> Nzb:
    return NzbParser(config).parse_bytes(source)


def parse_from_text(source: str, config: ParserConfig = ParserConfig()) -> Nzb:
    return NzbParser(config).parse_text(source)


def parse_from_file(path: str | Path, config: ParserConfig = ParserConfig()) -> Nzb:
    return NzbParser(config).parse_file(path)
