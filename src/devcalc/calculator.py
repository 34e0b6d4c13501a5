from .formatter import Formatter
from .lexer import Lexer
from .literal import parse_literal
from .parser import Parser
from .util import CalculatorError, ErrorKind


class Calculator:
    '''
    Expression and literal evaluation, rendered in all bases.

    Only holds limits, never per-call state, so one instance may serve any
    number of callers at once.
    '''

    def __init__(self,
                 max_safe_integer=Formatter.MAX_SAFE_INTEGER,
                 max_shift=Parser.MAX_SHIFT):
        '''
        :param max_safe_integer: Largest magnitude shown in hex, octal and
                                 binary. None for no limit.
        :param max_shift: Largest shift count accepted by <<.
        '''
        self.lexer = Lexer()
        self.formatter = Formatter(max_safe_integer=max_safe_integer)
        self.max_shift = max_shift

    def _stripped(self, text):
        stripped = text.strip()
        if not stripped:
            raise CalculatorError(ErrorKind.EMPTY_EXPRESSION,
                                  'Empty expression')
        return stripped

    def evaluate(self, text):
        '''
        Evaluate an infix expression.

        :raises CalculatorError: On the first lexical, syntax or arithmetic
                                 error.
        '''
        tokens = self.lexer.tokenize(self._stripped(text))
        value = Parser(tokens, max_shift=self.max_shift).parse()
        return self.formatter.format(value)

    def decode(self, text):
        '''
        Decode a single literal, with an optional sign, without any operators.

        Accepts everything the formatter prints, so -0x10 decodes to -16.
        '''
        stripped = self._stripped(text)
        sign, literal = stripped[0], stripped[1:]
        if sign not in '+-':
            sign, literal = '+', stripped
        value = parse_literal(literal)
        return self.formatter.format(-value if sign == '-' else value)


_calculator = Calculator()


def evaluate(text):
    return _calculator.evaluate(text)


def decode(text):
    return _calculator.decode(text)
