from .const import Flags
from .errors import StrfileError, FormatError
from .header import Strfile, parse, parse_bytes
from .reader import read_records, read_record
from .rot13 import rot13
__all__ = ["Flags", "StrfileError", "FormatError", "Strfile", "parse", "parse_bytes",
           "read_records", "read_record", "rot13"]
