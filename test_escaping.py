"""
Tests for query_string escaping.
"""

import pytest

from es_query_builder import escape
from es_query_builder.query.escaping import RESERVED_SEQUENCES


def test_escape_exclamation():
    assert escape("kimchy!") == "kimchy\\!"


def test_plain_text_is_unchanged():
    assert escape("hello world 42") == "hello world 42"


@pytest.mark.parametrize("sequence", RESERVED_SEQUENCES)
def test_each_reserved_sequence_is_escaped(sequence):
    assert escape(f"a{sequence}b") == f"a\\{sequence}b"


def test_backslash_is_escaped_once():
    assert escape("C:\\temp") == "C\\:\\\\temp"


def test_double_operators():
    assert escape("a && b || c") == "a \\&& b \\|| c"


def test_single_ampersand_and_pipe_are_not_reserved():
    assert escape("a & b | c") == "a & b | c"


def test_mixed_reserved_characters():
    assert escape('(1+1)=2 "quoted"') == '\\(1\\+1\\)\\=2 \\"quoted\\"'
