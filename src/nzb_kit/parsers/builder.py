# src/nzb_kit/parsers/builder.py

from .models import Nzb, NzbFile, NzbSegment
from .raw import RawFile, RawNzb


def build_nzb(raw: RawNzb) -> Nzb:
    """
    Reshape a raw tree into the public model.

    - meta pairs fold into a dict, a repeated key keeps its last value
    - files, groups and segments keep document order
    - every file and segment is a fresh object owned by the returned Nzb
    """
    meta: dict[str, str] = {}
    for entry in raw.meta:
        meta[entry.type] = entry.value

    return Nzb(meta=meta, files=[_build_file(f) for f in raw.files])


def _build_file(raw: RawFile) -> NzbFile:
    return NzbFile(
        poster=raw.poster,
        date=raw.date,
        subject=raw.subject,
        groups=list(raw.groups),
        segments=[
            NzbSegment(bytes=s.bytes, number=s.number, article_id=s.article_id)
            for s in raw.segments
        ],
    )
