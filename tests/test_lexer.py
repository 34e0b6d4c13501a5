'''
Lexer tests
'''

import regex

from devcalc.lexer import Token, TokenKind, tokenize
from devcalc.util import CalculatorError, ErrorKind

from pytest import mark, raises


def kinds(text):
    return [token.kind for token in tokenize(text)]


def test_empty_line_is_just_end():
    assert tokenize('') == [Token(TokenKind.END, '')]


def test_numbers_and_operators():
    assert tokenize('0xFF + 1') == [Token(TokenKind.NUMBER, '0xFF'),
                                    Token(TokenKind.PLUS, '+'),
                                    Token(TokenKind.NUMBER, '1'),
                                    Token(TokenKind.END, '')]


def test_prefix_and_digit_case_preserved():
    assert tokenize('0XaB')[0] == Token(TokenKind.NUMBER, '0XaB')
    assert tokenize('0B101')[0] == Token(TokenKind.NUMBER, '0B101')
    assert tokenize('0o17')[0] == Token(TokenKind.NUMBER, '0o17')


def test_decimal_points():
    assert tokenize('1.5')[0].text == '1.5'
    # Trailing point is still a number.
    assert tokenize('1.')[0].text == '1.'
    assert tokenize('007')[0].text == '007'


def test_every_symbol():
    assert kinds('+-*/%&|^~()<<>>') == [
        TokenKind.PLUS, TokenKind.MINUS, TokenKind.STAR, TokenKind.SLASH,
        TokenKind.PERCENT, TokenKind.AMP, TokenKind.PIPE, TokenKind.CARET,
        TokenKind.TILDE, TokenKind.LPAREN, TokenKind.RPAREN, TokenKind.SHL,
        TokenKind.SHR, TokenKind.END]


@mark.parametrize('word, kind', [
    ('AND', TokenKind.AMP),
    ('or', TokenKind.PIPE),
    ('Xor', TokenKind.CARET),
    ('nOT', TokenKind.TILDE),
    ('shl', TokenKind.SHL),
    ('SHR', TokenKind.SHR),
])
def test_words(word, kind):
    tokens = tokenize('42 {} 15'.format(word))
    assert tokens[1] == Token(kind, word)


def test_words_need_no_spaces_around_numbers():
    assert kinds('2AND3') == [TokenKind.NUMBER, TokenKind.AMP,
                              TokenKind.NUMBER, TokenKind.END]


def test_words_are_not_prefixes():
    with raises(CalculatorError, match=regex.escape('Unexpected word: ANDY')):
        tokenize('1 ANDY 2')


def test_unknown_word():
    with raises(CalculatorError) as error:
        tokenize('sin 1')
    assert error.value.kind is ErrorKind.UNEXPECTED_CHARACTER


def test_letters_after_hex_digits():
    with raises(CalculatorError, match=regex.escape('Unexpected word: g')):
        tokenize('0x1Fg')


@mark.parametrize('text, base', [
    ('0x', 'hexadecimal'),
    ('0X', 'hexadecimal'),
    ('0xZ', 'hexadecimal'),
    ('1 + 0b', 'binary'),
    ('0b2', 'binary'),
    ('0o', 'octal'),
    ('0o9', 'octal'),
])
def test_prefix_without_digits(text, base):
    with raises(CalculatorError,
                match=regex.escape('Invalid {} number'.format(base))) as error:
        tokenize(text)
    assert error.value.kind is ErrorKind.INVALID_LITERAL
    assert error.value.base == base


@mark.parametrize('text, character', [
    ('2 @ 3', '@'),
    ('1 < 2', '<'),
    ('1 > 2', '>'),
    ('.5', '.'),
    ('1.5.2', '.'),
    ('1_000', '_'),
    ('\N{ARABIC-INDIC DIGIT THREE}', '\N{ARABIC-INDIC DIGIT THREE}'),
])
def test_unexpected_character(text, character):
    message = regex.escape('Unexpected character: ' + character)
    with raises(CalculatorError, match=message) as error:
        tokenize(text)
    assert error.value.kind is ErrorKind.UNEXPECTED_CHARACTER


def test_lex_keeps_whitespace(lexer):
    matches = lexer.lex('1 +\t2')
    assert [m.group(0) for m in matches] == ['1', ' ', '+', '\t', '2']


def test_matched_groups(lexer):
    match = next(lexer.lex('0x10'))
    assert lexer.matchedgroups(match) == {'number': '0x10', 'hex': '0x10'}
