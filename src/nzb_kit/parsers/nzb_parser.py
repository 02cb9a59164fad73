# src/nzb_kit/parsers/nzb_parser.py

import logging
from pathlib import Path
from time import monotonic
from typing import BinaryIO

from nzb_kit.charsets import CharsetRegistry, sniff_encoding
from nzb_kit.errors import NzbError
from nzb_kit.observability import names
from nzb_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser
from .builder import build_nzb
from .config import ParserConfig
from .models import Nzb
from .structural import parse_structure

logger = logging.getLogger(__name__)


class NzbParser(DocumentParser):
    """
    NZB parser: charset resolution, structural parse, model build.

    - Encoding comes from the BOM or the XML declaration
    - Unknown encodings fall back to config.default_encoding unless strict
    - Files are returned in document order, never sorted
    """

    def __init__(
        self,
        config: ParserConfig = ParserConfig(),
        registry: CharsetRegistry | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config
        self.registry = registry or CharsetRegistry(config.default_encoding)
        self.metrics_hook = metrics_hook
        logger.debug(
            "Initialized NzbParser with default_encoding=%s, strict_encoding=%s",
            self.registry.default_encoding,
            config.strict_encoding,
        )

    def parse_bytes(self, source: bytes | BinaryIO) -> Nzb:
        data = _read_bytes(source)
        start = monotonic()
        try:
            declared = sniff_encoding(data)
            if (
                declared is not None
                and not self.config.strict_encoding
                and not self.registry.is_supported(declared)
            ):
                self.metrics_hook.increment(
                    names.CHARSET_FALLBACK_TOTAL, labels={"encoding": declared}
                )

            decoder = self.registry.resolve(
                declared, strict=self.config.strict_encoding
            )
            logger.debug(
                "Decoding %d bytes as %s (declared=%s)", len(data), decoder.name, declared
            )
            nzb = self._parse(decoder.decode(data))
        except NzbError as exc:
            self._record_error(exc)
            raise

        self._record_success(start, nzb, encoding=decoder.name)
        return nzb

    def parse_text(self, source: str) -> Nzb:
        start = monotonic()
        try:
            nzb = self._parse(source)
        except NzbError as exc:
            self._record_error(exc)
            raise

        self._record_success(start, nzb, encoding="text")
        return nzb

    def parse_file(self, path: str | Path) -> Nzb:
        # OSError from open() is the caller's to handle
        with open(path, "rb") as f:
            return self.parse_bytes(f)

    def _parse(self, text: str) -> Nzb:
        raw = parse_structure(text, huge_tree=self.config.huge_tree)
        return build_nzb(raw)

    def _record_success(self, start: float, nzb: Nzb, *, encoding: str) -> None:
        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.NZB_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.NZB_PARSE_TOTAL, labels={"encoding": encoding}
        )
        self.metrics_hook.increment(names.NZB_FILES_PARSED, len(nzb.files))
        self.metrics_hook.increment(names.NZB_SEGMENTS_PARSED, nzb.total_segments)
        logger.debug(
            "Parsed NZB: %d files, %d segments, %d meta entries",
            len(nzb.files),
            nzb.total_segments,
            len(nzb.meta),
        )

    def _record_error(self, exc: NzbError) -> None:
        self.metrics_hook.increment(
            names.NZB_PARSE_ERRORS_TOTAL, labels={"error": type(exc).__name__}
        )
        logger.debug("NZB parse failed: %s", exc)


def _read_bytes(source: bytes | bytearray | memoryview | BinaryIO) -> bytes:
    if isinstance(source, bytes):
        return source
    if isinstance(source, (bytearray, memoryview)):
        return bytes(source)
    return source.read()
