import pytest

from xmlprolog.namechars import is_name_char, is_name_start_char, is_valid_name


@pytest.mark.parametrize("char", ["A", "z", "_", ":", "\u00e9", "\u4e00", "\uac00"])
def test_name_start_chars(char):
    assert is_name_start_char(char) is True
    assert is_name_char(char) is True


@pytest.mark.parametrize("char", ["0", "9", "-", ".", "\u00b7"])
def test_name_chars_that_cannot_start(char):
    assert is_name_start_char(char) is False
    assert is_name_char(char) is True


@pytest.mark.parametrize("char", [" ", "<", "&", "\u00d7", "\ud800"])
def test_not_name_chars(char):
    assert is_name_start_char(char) is False
    assert is_name_char(char) is False


def test_characters_beyond_bmp_are_not_name_chars():
    assert is_name_char("\U00010000") is False
    assert is_name_start_char("\U00010000") is False


def test_every_start_char_is_a_name_char():
    starts = [chr(c) for c in range(0x10000) if is_name_start_char(chr(c))]
    assert starts
    assert all(is_name_char(c) for c in starts)


@pytest.mark.parametrize("bad", ["", "ab", 65])
def test_single_character_required(bad):
    with pytest.raises(ValueError):
        is_name_char(bad)


@pytest.mark.parametrize("name", ["doc", "xml:lang", "_a-b.c1", "\u00e9t\u00e9"])
def test_valid_names(name):
    assert is_valid_name(name) is True


@pytest.mark.parametrize("name", ["", "1abc", "-x", "a b", "a<b"])
def test_invalid_names(name):
    assert is_valid_name(name) is False