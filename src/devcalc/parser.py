from functools import partial
import math
import operator

from .lexer import TokenKind
from .literal import parse_literal
from .util import CalculatorError, ErrorKind, wrap_user_errors


def _exact(*values):
    return all(isinstance(value, int) for value in values)


def _bitwise(symbol, f):
    '''
    Restrict f to exact (int) operands.
    '''
    def wrapped(*args):
        if not _exact(*args):
            raise CalculatorError(
                ErrorKind.NON_INTEGER_BITWISE_OPERAND,
                'Bitwise operator {0} requires integer '
                'operands'.format(symbol))
        return f(*args)
    try:
        wrapped.__name__ = f.__name__
    except AttributeError:
        pass
    return wrapped


def _arithmetic(symbol, f):
    '''
    Report floats that don't fit a double instead of leaking OverflowError.
    '''
    return wrap_user_errors(ErrorKind.OVERFLOW,
                            'Numeric overflow in ' + symbol,
                            OverflowError)(f)


def _divide(left, right):
    # Always inexact, even when right divides left.
    if right == 0:
        raise CalculatorError(ErrorKind.DIVISION_BY_ZERO, 'Division by zero')
    return left / right


def _modulo(left, right):
    '''
    Truncating remainder; the sign follows the dividend, unlike Python's %.
    '''
    if right == 0:
        raise CalculatorError(ErrorKind.MODULO_BY_ZERO, 'Modulo by zero')
    if _exact(left, right):
        remainder = abs(left) % abs(right)
        return -remainder if left < 0 else remainder
    if math.isinf(left):
        return math.nan
    return math.fmod(left, right)


def _shift(f, left, count, *, limit=None):
    '''
    Shift by count. Only left shifts grow, so only they take a limit.
    '''
    if count < 0:
        raise CalculatorError(ErrorKind.SHIFT_OUT_OF_RANGE,
                              'Shift count must not be negative')
    if limit is not None and count > limit:
        raise CalculatorError(
            ErrorKind.SHIFT_OUT_OF_RANGE,
            'Shift count must be between 0 and {0}'.format(limit))
    return f(left, count)


class Parser:
    '''
    Recursive descent parser and evaluator over a token list.

    Evaluates as it parses; there is no tree. Exact values are ints, inexact
    values are floats, and no operator turns a float back into an int.

    Precedence, loosest first: | ^ & (<< >>) (+ -) (* / %) unary.
    '''

    MAX_SHIFT = 65536

    ARITHMETIC = {
        TokenKind.PLUS: _arithmetic('+', operator.__add__),
        TokenKind.MINUS: _arithmetic('-', operator.__sub__),
        TokenKind.STAR: _arithmetic('*', operator.__mul__),
        TokenKind.SLASH: _arithmetic('/', _divide),
        TokenKind.PERCENT: _arithmetic('%', _modulo),
    }

    BITWISE = {
        TokenKind.AMP: _bitwise('&', operator.__and__),
        TokenKind.PIPE: _bitwise('|', operator.__or__),
        TokenKind.CARET: _bitwise('^', operator.__xor__),
    }

    UNARY = {
        TokenKind.PLUS: operator.__pos__,
        TokenKind.MINUS: operator.__neg__,
        # ~x == -(x + 1) on Python ints, at any magnitude.
        TokenKind.TILDE: _bitwise('~', operator.__invert__),
    }

    def __init__(self, tokens, max_shift=None):
        '''
        :param tokens: Tokens ending with an END token.
        :param max_shift: Largest shift count accepted by <<.
        '''
        self.tokens = tokens
        self.position = 0
        self.max_shift = type(self).MAX_SHIFT if max_shift is None \
            else max_shift
        self.binary = dict(type(self).ARITHMETIC)
        self.binary.update(type(self).BITWISE)
        self.binary[TokenKind.SHL] = _bitwise(
            '<<', partial(_shift, operator.__lshift__, limit=self.max_shift))
        self.binary[TokenKind.SHR] = _bitwise(
            '>>', partial(_shift, operator.__rshift__))

    def current(self):
        return self.tokens[self.position]

    def advance(self):
        '''
        Consume and return the current token. Never moves past END.
        '''
        token = self.current()
        if token.kind is not TokenKind.END:
            self.position += 1
        return token

    def unexpected(self, token):
        if token.kind is TokenKind.END:
            message = 'Unexpected end of expression'
        else:
            message = 'Unexpected token: {0}'.format(token.text)
        return CalculatorError(ErrorKind.UNEXPECTED_TOKEN, message)

    def parse(self):
        '''
        Parse and evaluate the whole token list.
        '''
        try:
            value = self.bitor()
        except RecursionError:
            raise CalculatorError(ErrorKind.TOO_DEEP,
                                  'Expression nested too deeply') from None
        if self.current().kind is not TokenKind.END:
            raise self.unexpected(self.current())
        return value

    def _left_associative(self, operand, *kinds):
        '''
        Fold one precedence tier: operand (op operand)*.
        '''
        left = operand()
        while self.current().kind in kinds:
            kind = self.advance().kind
            left = self.binary[kind](left, operand())
        return left

    def bitor(self):
        return self._left_associative(self.bitxor, TokenKind.PIPE)

    def bitxor(self):
        return self._left_associative(self.bitand, TokenKind.CARET)

    def bitand(self):
        return self._left_associative(self.shift, TokenKind.AMP)

    def shift(self):
        # Looser than +, so 1 + 1 << 2 == 8.
        return self._left_associative(self.additive,
                                      TokenKind.SHL, TokenKind.SHR)

    def additive(self):
        return self._left_associative(self.term,
                                      TokenKind.PLUS, TokenKind.MINUS)

    def term(self):
        return self._left_associative(self.unary,
                                      TokenKind.STAR, TokenKind.SLASH,
                                      TokenKind.PERCENT)

    def unary(self):
        # A loop, not recursion: innermost operator applies first.
        operators = []
        while self.current().kind in type(self).UNARY:
            operators.append(type(self).UNARY[self.advance().kind])
        value = self.primary()
        for f in reversed(operators):
            value = f(value)
        return value

    def primary(self):
        token = self.current()
        if token.kind is TokenKind.NUMBER:
            self.advance()
            return parse_literal(token.text)
        elif token.kind is TokenKind.LPAREN:
            self.advance()
            value = self.bitor()
            if self.current().kind is not TokenKind.RPAREN:
                raise CalculatorError(ErrorKind.UNMATCHED_PARENTHESIS,
                                      'Expected closing parenthesis')
            self.advance()
            return value
        raise self.unexpected(token)


def parse(tokens):
    return Parser(tokens).parse()
