'''
Literal decoding tests
'''

from devcalc.literal import parse_literal
from devcalc.util import CalculatorError, ErrorKind

from pytest import mark, raises


@mark.parametrize('text, expected', [
    ('0xFF', 255),
    ('0XfF', 255),
    ('0b1010', 10),
    ('0B1', 1),
    ('0o777', 511),
    ('0O10', 8),
    ('42', 42),
    ('007', 7),
])
def test_integers(text, expected):
    value = parse_literal(text)
    assert value == expected
    assert type(value) is int


def test_point_makes_a_float():
    assert parse_literal('2.5') == 2.5
    value = parse_literal('1.')
    assert value == 1.0
    assert type(value) is float


@mark.parametrize('text', [
    '',
    '1_000',
    '0x1_0',
    '1e5',
    'inf',
    'nan',
    ' 1',
    '+1',
    '-1',
    '0x',
    '0xG',
    '0b12',
    '1.2.3',
])
def test_stricter_than_int_and_float(text):
    with raises(CalculatorError) as error:
        parse_literal(text)
    assert error.value.kind is ErrorKind.INVALID_NUMBER
    assert error.value.message == 'Invalid number: ' + text


def test_decimal_digit_count_is_unlimited():
    assert parse_literal('9' * 5000) == 10 ** 5000 - 1
    assert parse_literal('1' + '0' * 10000) == 10 ** 10000
