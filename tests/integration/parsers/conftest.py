from pathlib import Path

import pytest

from nzb_kit import parse_from_file
from nzb_kit.parsers.models import Nzb

PROLOG = (
    '<?xml version="1.0" encoding="{encoding}"?>\n'
    '<!DOCTYPE nzb PUBLIC "-//newzBin//DTD NZB 1.1//EN" '
    '"http://www.newzbin.com/DTD/nzb/nzb-1.1.dtd">\n'
)


def _file_block(name: str, index: int, total: int, segments: int) -> str:
    """One <file> with `segments` segments of a multi-part release."""
    lines = [
        f'  <file poster="uploader@example.com (Uploader)" date="{1700000000 + index}"'
        f' subject="[{index}/{total}] - &quot;{name}&quot; yEnc ({segments})">',
        "    <groups>",
        "      <group>alt.binaries.test</group>",
        "      <group>alt.binaries.boneless</group>",
        "    </groups>",
        "    <segments>",
    ]
    for number in range(1, segments + 1):
        lines.append(
            f'      <segment bytes="{739000 + number}" number="{number}">'
            f"{name}.{number}@news.example.com</segment>"
        )
    lines += ["    </segments>", "  </file>"]
    return "\n".join(lines)


def _create_release_nzb(path: Path) -> None:
    """A namespaced NZB in the layout indexers publish."""
    names = ["release.part01.rar", "release.part02.rar", "release.par2"]
    body = "\n".join(
        _file_block(name, i, len(names), segments=3)
        for i, name in enumerate(names, start=1)
    )
    text = (
        PROLOG.format(encoding="utf-8")
        + '<nzb xmlns="http://www.newzbin.com/DTD/2003/nzb">\n'
        + "  <head>\n"
        + '    <meta type="title">Release Name</meta>\n'
        + '    <meta type="category">TV &gt; HD</meta>\n'
        + "  </head>\n"
        + body
        + "\n</nzb>\n"
    )
    path.write_text(text, encoding="utf-8")


def _create_latin1_nzb(path: Path) -> None:
    text = (
        PROLOG.format(encoding="ISO-8859-1")
        + "<nzb>\n"
        + '  <head><meta type="title">Amélie à Montréal</meta></head>\n'
        + _file_block("amélie.mkv", 1, 1, segments=2)
        + "\n</nzb>\n"
    )
    path.write_bytes(text.encode("latin-1"))


def _create_truncated_nzb(path: Path) -> None:
    text = PROLOG.format(encoding="utf-8") + "<nzb>\n" + _file_block("x.bin", 1, 1, 2)
    path.write_text(text[: len(text) // 2], encoding="utf-8")


@pytest.fixture(scope="module")
def nzb_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test NZBs once per module."""
    dir_path: Path = tmp_path_factory.mktemp("nzbs")

    _create_release_nzb(dir_path / "release.nzb")
    _create_latin1_nzb(dir_path / "latin1.nzb")
    _create_truncated_nzb(dir_path / "truncated.nzb")

    return dir_path


@pytest.fixture(scope="module")
def parsed_release(nzb_dir: Path) -> Nzb:
    return parse_from_file(nzb_dir / "release.nzb")


@pytest.fixture(scope="module")
def parsed_latin1(nzb_dir: Path) -> Nzb:
    return parse_from_file(nzb_dir / "latin1.nzb")
