# src/nzb_kit/parsers/models.py

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NzbSegment:
    bytes: int
    number: int  # 1-based position within the file
    article_id: str


@dataclass
class NzbFile:
    poster: str
    date: int  # epoch seconds
    subject: str
    groups: list[str] = field(default_factory=list)
    segments: list[NzbSegment] = field(default_factory=list)

    # Nothing in the NZB grammar maps to this; it stays 0 unless the
    # consumer sets it (see nzb_kit.ordering).
    sequence_part: int = 0

    @property
    def total_bytes(self) -> int:
        return sum(s.bytes for s in self.segments)


@dataclass
class Nzb:
    meta: dict[str, str] = field(default_factory=dict)
    files: list[NzbFile] = field(default_factory=list)

    @property
    def total_bytes(self) -> int:
        return sum(f.total_bytes for f in self.files)

    @property
    def total_segments(self) -> int:
        return sum(len(f.segments) for f in self.files)

    @property
    def groups(self) -> set[str]:
        return {g for f in self.files for g in f.groups}
