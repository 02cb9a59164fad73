# src/nzb_kit/parsers/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    default_encoding: str = "utf-8"

    # raise UnsupportedEncoding / MalformedDocument instead of falling back
    strict_encoding: bool = False

    # lift lxml's limits on very large documents
    huge_tree: bool = False
