from .base import DocumentParser
from .builder import build_nzb
from .config import ParserConfig
from .factory import create_parser
from .models import Nzb, NzbFile, NzbSegment
from .nzb_parser import NzbParser
from .raw import RawFile, RawMeta, RawNzb, RawSegment
from .structural import parse_structure

__all__ = [
    "DocumentParser",
    "Nzb",
    "NzbFile",
    "NzbParser",
    "NzbSegment",
    "ParserConfig",
    "RawFile",
    "RawMeta",
    "RawNzb",
    "RawSegment",
    "build_nzb",
    "create_parser",
    "parse_structure",
]
