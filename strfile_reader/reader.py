# ==================================================
# strfile_reader/reader.py
# ==================================================
from __future__ import annotations

import io
import logging
import os
from typing import BinaryIO, Iterator

from .const import *
from .errors import FormatError
from .header import Strfile
from .rot13 import rot13

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
def _read_raw(f: BinaryIO, offset: int, boundary: bytes) -> bytes:
    f.seek(offset)
    buf = io.BytesIO()
    while True:
        line = f.readline()
        if not line or line == boundary:
            return buf.getvalue()
        buf.write(line)


def _decode(raw: bytes, header: Strfile, offset: int, encoding: str) -> str:
    try:
        text = raw.decode(encoding)
    except UnicodeDecodeError as exc:
        logger.warning("record at offset %d is not valid %s", offset, encoding)
        raise FormatError(f"record at offset {offset} is not valid {encoding}: {exc}") from exc
    if header.is_rotated:
        text = rot13(text)
    return text


def iter_records(f: BinaryIO, header: Strfile,
                 encoding: str = DEFAULT_ENCODING) -> Iterator[str]:
    """Yield every record of an open binary data file in offset-table order."""
    boundary = header.delimiter + NEWLINE
    for offset in header.offsets:
        yield _decode(_read_raw(f, offset, boundary), header, offset, encoding)


# ── public api ───────────────────────────────────────────────
def read_records(data_path: str | os.PathLike, header: Strfile,
                 encoding: str = DEFAULT_ENCODING) -> list[str]:
    """
    Extract all records named by ``header.offsets`` from the data file.

    The result has exactly ``header.count`` entries in offset-table order.
    Any OSError or FormatError aborts the call; no partial list is returned.
    """
    with open(data_path, "rb") as f:
        records = list(iter_records(f, header, encoding))
    logger.debug("read %d records from %s", len(records), data_path)
    return records


def read_record(data_path: str | os.PathLike, header: Strfile, index: int,
                encoding: str = DEFAULT_ENCODING) -> str:
    """Extract the single record at position ``index`` of the offset table."""
    if not 0 <= index < header.count:
        raise IndexError(f"record {index} out of range for {header.count} records")
    offset = header.offsets[index]
    with open(data_path, "rb") as f:
        raw = _read_raw(f, offset, header.delimiter + NEWLINE)
    return _decode(raw, header, offset, encoding)
