# ==================================================
# strfile_reader/rot13.py
# ==================================================
import codecs


def rot13(text: str) -> str:
    """Rotate ASCII letters by 13 places; everything else passes through."""
    return codecs.encode(text, "rot_13")
