# ==================================================
# strfile_reader/errors.py
# ==================================================


class StrfileError(Exception):
    """Base exception for strfile format problems."""


class FormatError(StrfileError, ValueError):
    """Index or data file content does not match the strfile layout."""
