import pytest

from tyraengine.strings import with_leading_zeros, without_extension


def test_leading_zeros_three_digits():
    assert with_leading_zeros("123") == "000123"


def test_leading_zeros_single_digit():
    assert with_leading_zeros("1") == "000001"


def test_leading_zeros_always_six_characters():
    for text in ["", "7", "42", "99999", "123456"]:
        result = with_leading_zeros(text)
        assert len(result) == 6
        assert result.endswith(text)


def test_leading_zeros_keeps_last_six_of_long_input():
    assert with_leading_zeros("12345678") == "345678"


def test_without_extension_strips_suffix():
    assert without_extension("skyfall2.png") == "skyfall2"


def test_without_extension_stops_at_first_dot():
    assert without_extension("model.frame.obj") == "model"


def test_without_extension_requires_dot():
    with pytest.raises(ValueError):
        without_extension("noextension")