# API
from .api import parse_from_bytes, parse_from_file, parse_from_text

# Charsets
from .charsets import CharsetRegistry, Decoder, resolve, sniff_encoding

# Errors
from .errors import MalformedDocument, NzbError, UnsupportedEncoding

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Ordering
from .ordering import compare_files, sort_files, sorted_files

# Parsers
from .parsers import (
    Nzb,
    NzbFile,
    NzbParser,
    NzbSegment,
    ParserConfig,
    create_parser,
)

__all__ = [
    # API
    "parse_from_bytes",
    "parse_from_file",
    "parse_from_text",
    # Charsets
    "CharsetRegistry",
    "Decoder",
    "resolve",
    "sniff_encoding",
    # Errors
    "MalformedDocument",
    "NzbError",
    "UnsupportedEncoding",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Ordering
    "compare_files",
    "sort_files",
    "sorted_files",
    # Parsers
    "Nzb",
    "NzbFile",
    "NzbParser",
    "NzbSegment",
    "ParserConfig",
    "create_parser",
]
