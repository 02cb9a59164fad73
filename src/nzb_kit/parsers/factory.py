# src/nzb_kit/parsers/factory.py

from nzb_kit.charsets import CharsetRegistry
from nzb_kit.observability.base import MetricsHook, NoOpMetricsHook

from .config import ParserConfig
from .nzb_parser import NzbParser


def create_parser(
    config: ParserConfig = ParserConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> NzbParser:
    return NzbParser(
        config=config,
        registry=CharsetRegistry(config.default_encoding),
        metrics_hook=metrics_hook,
    )
