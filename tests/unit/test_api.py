import io

import pytest

import nzb_kit
from nzb_kit import (
    MalformedDocument,
    ParserConfig,
    UnsupportedEncoding,
    parse_from_bytes,
    parse_from_text,
    sort_files,
)

DOCUMENT = """<nzb>
  <head>
    <meta type="x">a</meta>
    <meta type="title">Release</meta>
    <meta type="x">b</meta>
  </head>
  <file poster="p" date="1" subject="first"/>
  <file poster="p" date="2" subject="second"/>
  <file poster="p" date="3" subject="third"/>
</nzb>
"""


def test_parse_from_text() -> None:
    nzb = parse_from_text(DOCUMENT)

    assert nzb.meta == {"x": "b", "title": "Release"}
    assert [f.subject for f in nzb.files] == ["first", "second", "third"]


def test_parse_from_bytes() -> None:
    assert parse_from_bytes(DOCUMENT.encode("utf-8")) == parse_from_text(DOCUMENT)


def test_parse_from_bytes_stream() -> None:
    nzb = parse_from_bytes(io.BytesIO(DOCUMENT.encode("utf-8")))

    assert len(nzb.files) == 3


def test_malformed_input_returns_no_document() -> None:
    result = None
    with pytest.raises(MalformedDocument):
        result = parse_from_bytes(b"<nzb><file>")

    assert result is None


def test_strict_config_is_honoured() -> None:
    data = b'<?xml version="1.0" encoding="x-no-such-charset"?>' + DOCUMENT.encode()

    assert len(parse_from_bytes(data).files) == 3
    with pytest.raises(UnsupportedEncoding):
        parse_from_bytes(data, ParserConfig(strict_encoding=True))


def test_parsing_is_not_sorted_until_asked() -> None:
    nzb = parse_from_text(DOCUMENT)
    nzb.files[0].sequence_part = 2
    nzb.files[1].sequence_part = 1
    nzb.files[2].sequence_part = 1

    assert [f.subject for f in nzb.files] == ["first", "second", "third"]
    sort_files(nzb)
    assert [f.subject for f in nzb.files] == ["second", "third", "first"]


def test_package_exports() -> None:
    for name in nzb_kit.__all__:
        assert hasattr(nzb_kit, name)
