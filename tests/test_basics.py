import pytest

from rustlings.lessons.basics import (
    array_size_message,
    bigger,
    calculate_apple_price,
    call_me,
    current_favorite_color,
    describe_cat,
    describe_character,
    is_a_color_word,
    is_even,
    middle_slice,
    sale_price,
    second_number,
    square,
    times_two,
)


def test_apple_price_regular_and_bulk():
    assert calculate_apple_price(35) == 70
    assert calculate_apple_price(65) == 65


def test_apple_price_at_threshold_is_regular():
    assert calculate_apple_price(40) == 80
    assert calculate_apple_price(41) == 41


def test_times_two_positive():
    assert times_two(4) == 8


def test_times_two_negative():
    assert times_two(-4) == -8


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_bigger_of_equal_numbers():
    assert bigger(7, 7) == 7


def test_call_me_prints_each_ring(capsys):
    rings = call_me(3)
    assert rings == [
        "Ring! Call number 1",
        "Ring! Call number 2",
        "Ring! Call number 3",
    ]
    assert capsys.readouterr().out.splitlines() == rings


def test_call_me_zero_times(capsys):
    assert call_me(0) == []
    assert capsys.readouterr().out == ""


def test_is_true_when_even():
    assert is_even(4) is True


def test_is_false_when_odd():
    assert is_even(5) is False


@pytest.mark.parametrize("price, expected", [(51, 48), (50, 40), (11, 8)])
def test_sale_price(price, expected):
    assert sale_price(price) == expected


def test_square():
    assert square(3) == 9
    assert square(-4) == 16


@pytest.mark.parametrize(
    "character, expected",
    [
        ("C", "Alphabetical!"),
        ("é", "Alphabetical!"),
        ("7", "Numerical!"),
        ("%", "Neither alphabetic nor numeric!"),
    ],
)
def test_describe_character(character, expected):
    assert describe_character(character) == expected


@pytest.mark.parametrize("text", ["", "ab"])
def test_describe_character_rejects_non_single(text):
    with pytest.raises(ValueError):
        describe_character(text)


def test_array_size_message():
    assert array_size_message(list(range(100))) == "Wow, that's a big array!"
    assert array_size_message(list(range(99))) == "Meh, I eat arrays like that for breakfast."


def test_slice_out_of_array():
    assert middle_slice([1, 2, 3, 4, 5]) == [2, 3, 4]


def test_describe_cat():
    assert describe_cat(("Furry McFurson", 3.5)) == "Furry McFurson is 3.5 years old."


def test_second_number():
    assert second_number((1, 2, 3)) == 2


def test_current_favorite_color():
    assert current_favorite_color() == "blue"


@pytest.mark.parametrize(
    "word, expected",
    [("green", True), ("blue", True), ("red", True), ("purple", False), ("Green", False)],
)
def test_is_a_color_word(word, expected):
    assert is_a_color_word(word) is expected