# src/nzb_kit/parsers/base.py

from abc import ABC, abstractmethod
from typing import BinaryIO

from .models import Nzb


class DocumentParser(ABC):
    @abstractmethod
    def parse_bytes(self, source: bytes | BinaryIO) -> Nzb:
        """
        Parse raw document bytes, detecting the text encoding.

        Requirements:
        - Deterministic output for same input
        - All or nothing: errors are raised, no partial document
        """
        raise NotImplementedError

    @abstractmethod
    def parse_text(self, source: str) -> Nzb:
        """Parse an already decoded document."""
        raise NotImplementedError
