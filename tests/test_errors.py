import io

import pytest

from rustlings.lessons.errors import (
    CreationError,
    NegativeError,
    PositiveNonzeroInteger,
    ZeroError,
    generate_nametag_text,
    pop_too_much,
    read_and_validate,
    spend_tokens,
    total_cost,
)


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError) as info:
        generate_nametag_text("")
    assert str(info.value) == "`name` was empty; it must be nonempty."


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ValueError) as info:
        total_cost("beep boop")
    assert str(info.value) == "invalid digit found in string"


def test_item_quantity_empty():
    with pytest.raises(ValueError) as info:
        total_cost("")
    assert str(info.value) == "cannot parse integer from empty string"


@pytest.mark.parametrize("text", [" 5", "5 ", "1_0", "-", "+"])
def test_item_quantity_rejects_loose_forms(text):
    with pytest.raises(ValueError) as info:
        total_cost(text)
    assert str(info.value) == "invalid digit found in string"


def test_item_quantity_with_sign():
    assert total_cost("+5") == 26
    assert total_cost("-1") == -4


def test_item_quantity_out_of_range():
    with pytest.raises(ValueError) as info:
        total_cost("2147483648")
    assert str(info.value) == "number too large to fit in target type"
    with pytest.raises(ValueError) as info:
        total_cost("-2147483649")
    assert str(info.value) == "number too small to fit in target type"


def test_spend_tokens_affordable(capsys):
    assert spend_tokens(100, "8") == 59
    assert capsys.readouterr().out == "You now have 59 tokens.\n"


def test_spend_tokens_unaffordable(capsys):
    assert spend_tokens(10, "8") == 10
    assert capsys.readouterr().out == "You can't afford that many!\n"


def test_spend_tokens_bad_input():
    with pytest.raises(ValueError):
        spend_tokens(100, "eight")


def test_should_not_panic(capsys):
    assert pop_too_much() is True
    assert "The last item in the list is 3" in capsys.readouterr().out


def test_positive_nonzero_integer_creation():
    assert PositiveNonzeroInteger(10).value == 10
    with pytest.raises(NegativeError):
        PositiveNonzeroInteger(-10)
    with pytest.raises(ZeroError):
        PositiveNonzeroInteger(0)


def test_creation_error_messages():
    with pytest.raises(CreationError) as info:
        PositiveNonzeroInteger(-1)
    assert str(info.value) == "Negative"
    with pytest.raises(CreationError) as info:
        PositiveNonzeroInteger(0)
    assert str(info.value) == "Zero"


def test_read_success():
    assert read_and_validate(io.StringIO("42\n")) == PositiveNonzeroInteger(42)


def test_read_bytes_stream():
    assert read_and_validate(io.BytesIO(b"7\n")) == PositiveNonzeroInteger(7)


def test_read_not_num():
    with pytest.raises(ValueError) as info:
        read_and_validate(io.StringIO("eleven billion\n"))
    assert str(info.value) == "invalid digit found in string"


def test_read_non_positive():
    with pytest.raises(NegativeError):
        read_and_validate(io.StringIO("-40\n"))


def test_read_zero():
    with pytest.raises(ZeroError):
        read_and_validate(io.StringIO("0\n"))


class _Broken:
    def readline(self):
        raise BrokenPipeError("uh-oh!")


def test_read_ioerror():
    with pytest.raises(OSError) as info:
        read_and_validate(_Broken())
    assert str(info.value) == "uh-oh!"