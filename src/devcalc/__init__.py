'''
Programmer calculator.

Evaluates infix arithmetic and bitwise expressions over hex (0x), octal (0o),
binary (0b) and decimal literals, and shows the result in all four bases.

Integers are exact and unbounded; bitwise operators treat them as infinitely
sign-extended two's complement, so ~0 is -1 rather than 0xFFFFFFFF. Anything
involving a division or a decimal point becomes a double, and stays one: 4 / 2
is shown as 2, but has no hex, octal or binary form.

Precedence follows C: | is loosest, then ^, &, shifts, + -, then * / %.
Bitwise operators may also be spelled AND, OR, XOR, NOT, SHL and SHR, in any
case.
'''

from .calculator import Calculator, evaluate, decode
from .cli import CLI
from .formatter import CalculatorResult, Formatter
from .lexer import Lexer, Token, TokenKind
from .parser import Parser
from .util import CalculatorError, ErrorKind


__all__ = ('Calculator', 'evaluate', 'decode', 'CalculatorResult',
           'CalculatorError', 'ErrorKind', 'Formatter', 'Lexer', 'Token',
           'TokenKind', 'Parser', 'CLI')
