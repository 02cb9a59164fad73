# src/nzb_kit/ordering/ordering.py

from collections.abc import Iterable
from functools import cmp_to_key

from nzb_kit.parsers.models import Nzb, NzbFile


def compare_files(a: NzbFile, b: NzbFile) -> int:
    """Three-way comparison on sequence_part: -1, 0 or 1."""
    return (a.sequence_part > b.sequence_part) - (a.sequence_part < b.sequence_part)


file_sort_key = cmp_to_key(compare_files)


def sorted_files(files: Iterable[NzbFile]) -> list[NzbFile]:
    return sorted(files, key=file_sort_key)


def sort_files(nzb: Nzb) -> Nzb:
    """
    Sort nzb.files in place by ascending sequence_part.

    The sort is stable: files sharing a sequence_part (including the
    common case where none was ever set and all are 0) keep their
    document order. Returns the same Nzb for chaining.
    """
    nzb.files.sort(key=file_sort_key)
    return nzb
