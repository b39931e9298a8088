import pytest

from logicdrills.left_right import decode_letter, decode_pattern, main


@pytest.mark.parametrize("value", [0, 3, 7, -2])
def test_decode_letter_left(value):
    assert decode_letter("L", value) == (value, value - 1)


@pytest.mark.parametrize("value", [0, 3, 7, -2])
def test_decode_letter_right(value):
    assert decode_letter("R", value) == (value - 1, value)


@pytest.mark.parametrize("value", [0, 3, 7])
def test_decode_letter_equal(value):
    assert decode_letter("=", value) == (value, value)


def test_decode_letter_unknown():
    assert decode_letter("X", 9) == (0, 0)


@pytest.mark.parametrize(
    "pattern, pair, text",
    [("L", (4, 2), "4"), ("R", (2, 4), "4"), ("=", (2, 2), "2")],
)
def test_first_letter(pattern, pair, text):
    decoded = decode_pattern(pattern)
    assert decoded.pairs == [pair]
    assert decoded.text == text


def test_worked_example():
    assert decode_pattern("LRL=R").text == "42211"


def test_pairs_chain_from_previous_right():
    pattern = "LRL=RRL="
    decoded = decode_pattern(pattern)
    assert len(decoded.pairs) == len(pattern)
    for letter, previous, current in zip(
        pattern[1:], decoded.pairs, decoded.pairs[1:]
    ):
        assert current == decode_letter(letter, previous[1])


def test_unknown_later_letter_adds_zero_pair_and_no_digit():
    decoded = decode_pattern("LX")
    assert decoded.pairs == [(4, 2), (0, 0)]
    assert decoded.text == "4"


def test_empty_pattern_raises():
    with pytest.raises(ValueError):
        decode_pattern("")


def test_bad_first_letter_raises():
    with pytest.raises(ValueError):
        decode_pattern("XL")


def test_main_prints_decoded(capsys):
    assert main(["LRL=R"]) == 0
    out = capsys.readouterr().out
    assert "Decoded string: 42211" in out
    assert "Decoded value: [[4 2]" in out


def test_main_without_pattern_prints_usage(capsys):
    assert main([]) == 0
    assert "Usage" in capsys.readouterr().out


def test_main_bad_pattern(capsys):
    assert main(["?"]) == 1
    assert "Invalid pattern" in capsys.readouterr().err