"""Runs every program under tests/programs and compares with its .out file."""

import pathlib

import pytest

from lust.core import eval_source

PROGRAMS = sorted((pathlib.Path(__file__).parent / "programs").glob("*.lust"))


@pytest.mark.parametrize("program", PROGRAMS, ids=lambda p: p.stem)
def test_program(program):
    expected = program.with_suffix(".out").read_text(encoding="utf-8")
    lines = eval_source(program.read_text(encoding="utf-8"))
    assert "".join(line + "\n" for line in lines) == expected
