"""
XML decoding for Tomboy archive files.

Element names are matched by local name, so both the namespaced files Tomboy
writes (``xmlns="http://beatniksoftware.com/tomboy"``) and bare hand-written
files decode the same way.
"""

from __future__ import annotations

import codecs
import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional, Union
from xml.parsers import expat

from pydantic import ValidationError

from pytomboy.exceptions import ArchiveDecodeError, ArchiveReadError

from .domain import NoteContent
from .models import Manifest, Note

LOGGER = logging.getLogger(__name__)

PathLike = Union[str, Path]

# UTF-32 is left out: expat cannot read it, so ElementTree rejects it first.
_BOMS = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)

# BOM-less UTF-16, recognised by the first "<" as expat does
_UTF16_NO_BOM = ((b"<\x00", "utf-16-le"), (b"\x00<", "utf-16-be"))

_DECL_ENCODING = re.compile(
    rb"""<\?xml[^>]*?\bencoding\s*=\s*["']([A-Za-z][A-Za-z0-9._-]*)["']"""
)


def _local_name(tag: str) -> str:
    # ElementTree spells namespaced tags "{uri}name"; expat (no ns processing)
    # spells them "prefix:name".
    return tag.rpartition("}")[2].rpartition(":")[2]


def _child(parent: ET.Element, name: str) -> Optional[ET.Element]:
    for elem in parent:
        if _local_name(elem.tag) == name:
            return elem
    return None


def _parse(data: bytes, path: Optional[PathLike]) -> ET.Element:
    try:
        return ET.fromstring(data)
    except (ET.ParseError, LookupError, UnicodeError) as e:
        raise ArchiveDecodeError(f"Malformed XML in {path}: {e}", path) from e


def _start_tag_end(data: bytes, start: int) -> int:
    """Index of the ``>`` closing the start tag that begins at ``start``."""
    quote = None
    for idx in range(start, len(data)):
        ch = data[idx : idx + 1]
        if quote:
            if ch == quote:
                quote = None
        elif ch in (b'"', b"'"):
            quote = ch
        elif ch == b">":
            return idx
    return len(data)


def detect_encoding(data: bytes) -> str:
    """Pick the codec expat would use: byte order mark, then declaration."""
    for bom, codec in _BOMS + _UTF16_NO_BOM:
        if data.startswith(bom):
            return codec
    m = _DECL_ENCODING.match(data)
    return m.group(1).decode("ascii") if m else "utf-8"


def inner_xml(data: bytes, name: str) -> Optional[str]:
    """Return the verbatim markup inside the first root child called ``name``.

    Nothing is unescaped or re-serialized: entity references, nested elements
    and namespace prefixes come back exactly as they appear in ``data``.
    Returns None when the root has no such child.

    The document is transcoded to UTF-8 first so expat byte offsets line up
    with single-byte ``<`` and ``>`` whatever the source encoding was.
    """
    utf8 = data.decode(detect_encoding(data)).encode("utf-8")
    parser = expat.ParserCreate("utf-8")
    span: List[Optional[int]] = [None, None]
    depth = [0]

    def on_start(tag, attrs):
        depth[0] += 1
        if depth[0] == 2 and span[0] is None and _local_name(tag) == name:
            span[0] = parser.CurrentByteIndex

    def on_end(tag):
        if (
            depth[0] == 2
            and span[0] is not None
            and span[1] is None
            and _local_name(tag) == name
        ):
            span[1] = parser.CurrentByteIndex
        depth[0] -= 1

    parser.StartElementHandler = on_start
    parser.EndElementHandler = on_end
    parser.Parse(utf8, True)

    start, end = span
    if start is None or end is None:
        return None
    open_end = _start_tag_end(utf8, start)
    # <text/> reports its end event at the start tag itself
    if utf8[open_end - 1 : open_end] == b"/" or end <= open_end:
        return ""
    return utf8[open_end + 1 : end].decode("utf-8")


class ManifestDecoder:
    """Decode ``manifest.xml`` bytes to a Manifest."""

    def decode(self, data: bytes, path: Optional[PathLike] = None) -> Manifest:
        root = _parse(data, path)
        notes = [dict(e.attrib) for e in root if _local_name(e.tag) == "note"]
        LOGGER.debug(
            "archive.decoder.manifest root=%s notes=%d",
            _local_name(root.tag),
            len(notes),
        )
        try:
            return Manifest.model_validate({**root.attrib, "notes": notes})
        except ValidationError as e:
            raise ArchiveDecodeError(
                f"Unexpected manifest layout in {path}: {e}", path
            ) from e


class NoteDecoder:
    """Decode ``.note`` bytes to a Note (title + raw body markup)."""

    def decode(self, data: bytes, path: Optional[PathLike] = None) -> Note:
        root = _parse(data, path)
        title_elem = _child(root, "title")
        if title_elem is None:
            raise ArchiveDecodeError(f"No <title> element in {path}", path)
        if _child(root, "text") is None:
            raise ArchiveDecodeError(f"No <text> element in {path}", path)

        try:
            raw = inner_xml(data, "text") or ""
        except (LookupError, UnicodeError, expat.ExpatError) as e:
            raise ArchiveDecodeError(
                f"Cannot read note body in {path}: {e}", path
            ) from e
        title = title_elem.text or ""
        LOGGER.debug(
            "archive.decoder.note title_len=%d body_len=%d", len(title), len(raw)
        )
        return Note(title=title, content=NoteContent(raw=raw))


def read_file(path: PathLike) -> bytes:
    """Read a whole archive file, mapping OS errors to ArchiveReadError."""
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise ArchiveReadError(f"Error opening {path}. {e}", path) from e
    LOGGER.debug("archive.decoder.read path=%s bytes=%d", path, len(data))
    return data


def _load(path: PathLike, decoder):
    try:
        return decoder.decode(read_file(path), path)
    except (ArchiveReadError, ArchiveDecodeError) as e:
        LOGGER.error("%s", e)
        raise


def load_manifest(path: PathLike) -> Manifest:
    """Read and decode a manifest file.

    Raises ArchiveReadError for I/O failures and ArchiveDecodeError for
    malformed documents; either way a diagnostic line is logged first.
    """
    return _load(path, ManifestDecoder())


def load_note(path: PathLike) -> Note:
    """Read and decode a single ``.note`` file. Errors as for load_manifest."""
    return _load(path, NoteDecoder())
