# src/nzb_kit/parsers/structural.py

import logging
import re
from collections.abc import Iterator
from typing import Any, TypeVar

from lxml import etree
from pydantic import BaseModel, ValidationError

from nzb_kit.errors import MalformedDocument

from .raw import RawFile, RawMeta, RawNzb, RawSegment

logger = logging.getLogger(__name__)

ROOT_TAG = "nzb"

_XML_DECLARATION = re.compile(r"^\ufeff?<\?xml\s[^>]*\?>")

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_structure(text: str, *, huge_tree: bool = False) -> RawNzb:
    """
    Parse decoded NZB text into a raw structural tree.

    The walk is tolerant: elements are matched on their local name so the
    newzbin namespace is optional, unknown elements and attributes are
    skipped, and missing containers produce empty lists.

    Raises:
        MalformedDocument: markup is not well-formed, the root is not <nzb>,
            or an integer attribute does not hold an integer
    """
    if not text.strip():
        raise MalformedDocument("Document is empty", line=1, column=1)

    root = _parse_xml(text, huge_tree=huge_tree)

    if _local_name(root) != ROOT_TAG:
        raise MalformedDocument(
            f"Expected root element <{ROOT_TAG}>, found <{_local_name(root)}>",
            line=root.sourceline,
        )

    meta = [
        RawMeta(type=el.get("type", ""), value=_text(el))
        for head in _children(root, "head")
        for el in _children(head, "meta")
    ]
    files = [_parse_file(el) for el in _children(root, "file")]

    logger.debug("Parsed raw tree: %d meta, %d files", len(meta), len(files))
    return RawNzb(meta=meta, files=files)


def _parse_xml(text: str, *, huge_tree: bool) -> etree._Element:
    # Text is already decoded; the declared encoding no longer applies
    text = _XML_DECLARATION.sub("", text, count=1)
    parser = etree.XMLParser(
        encoding="utf-8",
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
        huge_tree=huge_tree,
    )
    try:
        return etree.fromstring(text.encode("utf-8", "replace"), parser=parser)
    except etree.XMLSyntaxError as exc:
        raise MalformedDocument(
            f"Invalid NZB XML: {exc.msg}", line=exc.lineno, column=exc.offset
        ) from exc


def _parse_file(el: etree._Element) -> RawFile:
    groups = [
        _text(group)
        for container in _children(el, "groups")
        for group in _children(container, "group")
    ]
    segments = [
        _validated(
            RawSegment,
            seg,
            {**_attrs(seg, "bytes", "number"), "article_id": _text(seg)},
        )
        for container in _children(el, "segments")
        for seg in _children(container, "segment")
    ]

    return _validated(
        RawFile,
        el,
        {
            **_attrs(el, "poster", "date", "subject"),
            "groups": groups,
            "segments": segments,
        },
    )


def _validated(
    model: type[ModelT], el: etree._Element, values: dict[str, Any]
) -> ModelT:
    try:
        return model(**values)
    except ValidationError as exc:
        error = exc.errors()[0]
        field = error["loc"][0] if error["loc"] else "?"
        raise MalformedDocument(
            f"Invalid value {error.get('input')!r} for attribute '{field}' "
            f"of <{_local_name(el)}>: {error['msg']}",
            line=el.sourceline,
        ) from exc


def _children(el: etree._Element, name: str) -> Iterator[etree._Element]:
    for child in el:
        # entity references are nodes too when entities are not resolved
        if isinstance(child.tag, str) and _local_name(child) == name:
            yield child


def _attrs(el: etree._Element, *names: str) -> dict[str, str]:
    return {name: el.get(name) for name in names if el.get(name) is not None}


def _local_name(el: etree._Element) -> str:
    return etree.QName(el).localname


def _text(el: etree._Element) -> str:
    return "".join(el.itertext())
