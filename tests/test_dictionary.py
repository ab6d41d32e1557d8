import pytest
from lexorder.dictionary import parse_dictionary, read_dictionary


def test_parse_dictionary_lines():
    assert parse_dictionary("cbca\ncbb\naa\naba\n") == ["cbca", "cbb", "aa", "aba"]


def test_parse_dictionary_without_final_newline():
    assert parse_dictionary("a\nb") == ["a", "b"]


def test_parse_dictionary_keeps_blank_lines():
    assert parse_dictionary("a\n\nb\n\n") == ["a", "", "b", ""]


def test_parse_dictionary_crlf():
    assert parse_dictionary("a\r\nb\r\n") == ["a", "b"]


def test_parse_dictionary_keeps_spaces():
    assert parse_dictionary(" a\nb \n") == [" a", "b "]


def test_parse_dictionary_empty():
    assert parse_dictionary("") == []


def test_read_dictionary(tmp_path):
    path = tmp_path / 'dict.txt'
    path.write_text("żaba\nźle\n", encoding='utf-8')
    assert read_dictionary(path) == ["żaba", "źle"]


def test_read_dictionary_encoding(tmp_path):
    path = tmp_path / 'dict.txt'
    path.write_bytes("é\nè\n".encode('latin-1'))
    assert read_dictionary(str(path), encoding='latin-1') == ["é", "è"]


def test_read_dictionary_missing(tmp_path):
    with pytest.raises(OSError):
        read_dictionary(tmp_path / 'missing.txt')
