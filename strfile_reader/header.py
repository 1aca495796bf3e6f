# ==================================================
# strfile_reader/header.py
# ==================================================
from __future__ import annotations

import logging
import os
import stat
import struct
from dataclasses import dataclass

import numpy as np

from .const import *
from .errors import FormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Strfile:
    """Parsed strfile header plus its offset table (never mutated)."""
    version:         int
    count:           int
    longest_length:  int
    shortest_length: int
    flags:           int
    delimiter:       bytes
    offsets:         tuple[int, ...]

    def __post_init__(self):
        if len(self.delimiter) != 1:
            raise FormatError(f"delimiter must be a single byte, got {self.delimiter!r}")
        if len(self.offsets) != self.count:
            raise FormatError(
                f"offset table holds {len(self.offsets)} entries, header declares {self.count}")

    @property
    def record_count(self) -> int:
        return self.count

    # ------------------------------------------------------------------
    def is_flag_set(self, flag: Flags, legacy: bool = False) -> bool:
        """
        Test one bit of ``flags``.

        legacy=True reproduces the historical ``flags & mask == 1`` test,
        which can only ever be true for ``Flags.RANDOM``.
        """
        if legacy:
            return self.flags & flag == 1
        return self.flags & flag != 0

    @property
    def is_random(self) -> bool:
        return self.is_flag_set(Flags.RANDOM)

    @property
    def is_ordered(self) -> bool:
        return self.is_flag_set(Flags.ORDERED)

    @property
    def is_rotated(self) -> bool:
        return self.is_flag_set(Flags.ROTATED)

    @property
    def has_comments(self) -> bool:
        return self.is_flag_set(Flags.HAS_COMMENTS)


# ── decoding helpers ─────────────────────────────────────────
def _unpack_header(raw: bytes) -> tuple:
    if len(raw) < HEADER_SIZE:
        logger.warning("strfile header truncated: %d of %d bytes", len(raw), HEADER_SIZE)
        raise FormatError(f"header needs {HEADER_SIZE} bytes, got {len(raw)}")
    return struct.unpack_from(HEADER_FMT, raw, 0)


def _check_table(count: int, available: int):
    need = count * OFFSET_SIZE
    if available < need:
        logger.warning("strfile offset table truncated: %d of %d bytes", available, need)
        raise FormatError(
            f"offset table for {count} records needs {need} bytes, got {available}")


def _unpack_offsets(raw: bytes, count: int, start: int = 0) -> tuple[int, ...]:
    if not count:
        return ()
    table = np.frombuffer(raw, dtype=OFFSET_FMT, count=count, offset=start)
    return tuple(table.tolist())


def _read_table(f, need: int) -> bytearray:
    # grows with the bytes actually delivered, not with the declared count
    table = bytearray()
    while len(table) < need:
        chunk = f.read(min(TABLE_CHUNK, need - len(table)))
        if not chunk:
            break
        table += chunk
    return table


def _build(fields: tuple, offsets: tuple[int, ...]) -> Strfile:
    version, count, longest, shortest, flags, delim = fields
    header = Strfile(version, count, longest, shortest, flags, delim, offsets)
    logger.debug("strfile header: version=%d count=%d longest=%d shortest=%d "
                 "flags=%#x delim=%r", version, count, longest, shortest, flags, delim)
    return header


# ── public api ───────────────────────────────────────────────
def parse_bytes(raw: bytes) -> Strfile:
    """Decode an in-memory index image."""
    fields = _unpack_header(raw)
    count  = fields[1]
    _check_table(count, len(raw) - HEADER_SIZE)
    return _build(fields, _unpack_offsets(raw, count, HEADER_SIZE))


def parse(index_path: str | os.PathLike) -> Strfile:
    """
    Read the header and offset table of a strfile index.

    Raises OSError when the file cannot be opened or read and FormatError
    when it is shorter than the header or the declared offset table.
    """
    with open(index_path, "rb") as f:
        st     = os.fstat(f.fileno())
        fields = _unpack_header(f.read(HEADER_SIZE))
        count  = fields[1]
        # pipes report st_size 0; only regular files can be checked up front
        if stat.S_ISREG(st.st_mode):
            _check_table(count, st.st_size - HEADER_SIZE)
        table = _read_table(f, count * OFFSET_SIZE)
        _check_table(count, len(table))
    return _build(fields, _unpack_offsets(table, count))
