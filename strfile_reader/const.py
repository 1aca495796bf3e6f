# ==================================================
# strfile_reader/const.py
# ==================================================
from enum import IntFlag

HEADER_FMT  = "!LLLLLc3x"   # version, count, longest, shortest, flags, delim, pad
HEADER_SIZE = 24            # bytes (5*4 + 1 + 3 padding)
OFFSET_FMT  = ">u4"         # numpy dtype of one offset table entry
OFFSET_SIZE = 4
TABLE_CHUNK = 64 * 1024     # read size for offset tables of unknown length
NEWLINE     = b"\n"
DEFAULT_ENCODING = "utf-8"


class Flags(IntFlag):
    RANDOM       = 0x1      # randomized pointers
    ORDERED      = 0x2      # alphabetical order
    ROTATED      = 0x4      # ROT13 "encrypted" text
    HAS_COMMENTS = 0x8      # records may carry comment lines
