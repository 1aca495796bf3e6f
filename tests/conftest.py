"""
Fixtures that write small strfile index/data pairs to tmp_path.
"""

from __future__ import annotations

import struct
from pathlib import Path

import pytest


def pack_index(offsets, flags=0, delim=b"%", version=2, longest=0, shortest=0,
               count=None) -> bytes:
    if count is None:
        count = len(offsets)
    header = struct.pack("!LLLLLc3x", version, count, longest, shortest, flags, delim)
    return header + b"".join(struct.pack("!L", o) for o in offsets)


def pack_data(records, delim=b"%", trailing_boundary=True):
    """Return (data bytes, offsets) for a list of encoded records."""
    data = bytearray()
    offsets = []
    boundary = delim + b"\n"
    for i, rec in enumerate(records):
        offsets.append(len(data))
        data += rec
        if trailing_boundary or i < len(records) - 1:
            data += boundary
    return bytes(data), offsets


@pytest.fixture
def make_strfile(tmp_path: Path):
    def _make(records, flags=0, delim=b"%", trailing_boundary=True, name="fortunes"):
        encoded = [r.encode("utf-8") if isinstance(r, str) else r for r in records]
        data, offsets = pack_data(encoded, delim, trailing_boundary)
        data_path = tmp_path / name
        index_path = tmp_path / (name + ".dat")
        data_path.write_bytes(data)
        index_path.write_bytes(pack_index(
            offsets, flags=flags, delim=delim,
            longest=max((len(r) for r in encoded), default=0),
            shortest=min((len(r) for r in encoded), default=0)))
        return data_path, index_path
    return _make
