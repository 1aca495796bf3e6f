"""
Semantic test: example dump driver.
"""

from __future__ import annotations

import runpy
from pathlib import Path

import strfile_reader

SCRIPT = Path(strfile_reader.__file__).parent / "examples" / "dump_strfile.py"


def load_main():
    return runpy.run_path(str(SCRIPT), run_name="dump_strfile")["main"]


def test_dump_all_records(make_strfile, capsys) -> None:
    data, _ = make_strfile(["one\n", "two\n"])
    assert load_main()([str(data)]) == 0
    assert capsys.readouterr().out == "one\n%\ntwo\n"


def test_dump_single_record(make_strfile, capsys) -> None:
    data, index = make_strfile(["one\n", "two\n"], name="quotes")
    assert load_main()([str(data), "--index", str(index), "--record", "1"]) == 0
    assert capsys.readouterr().out == "two\n"


def test_dump_header(make_strfile, capsys) -> None:
    data, _ = make_strfile(["one\n", "three\n"], flags=4)
    assert load_main()([str(data), "--header"]) == 0
    out = capsys.readouterr().out
    assert "count:    2" in out
    assert "rotated=True" in out
    assert "delim:    %" in out


def test_dump_terminates_eof_record_with_newline(make_strfile, capsys) -> None:
    data, _ = make_strfile(["one\n", "two"], trailing_boundary=False)
    assert load_main()([str(data)]) == 0
    assert capsys.readouterr().out == "one\n%\ntwo\n"
