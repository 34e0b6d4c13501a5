from decimal import Decimal
from typing import NamedTuple


class CalculatorResult(NamedTuple):
    decimal: str
    hex: str
    octal: str
    binary: str
    is_integer: bool


NOT_AVAILABLE = 'N/A'


class Formatter:
    '''
    Render a value in decimal, hexadecimal, octal and binary.

    Ints are only shown in the other bases while their magnitude stays within
    max_safe_integer; past that they are displayed like reals. Floats are
    never shown in the other bases, even when integral.
    '''

    # Largest integer a double holds exactly.
    MAX_SAFE_INTEGER = 2 ** 53 - 1

    BASES = [
        ('hex', '0x', 'X'),
        ('octal', '0o', 'o'),
        ('binary', '0b', 'b'),
    ]

    def __init__(self, max_safe_integer=MAX_SAFE_INTEGER):
        '''
        :param max_safe_integer: None to show ints of any size in all bases.
        '''
        self.max_safe_integer = max_safe_integer

    def issafe(self, value):
        return isinstance(value, int) and (
            self.max_safe_integer is None or
            abs(value) <= self.max_safe_integer)

    def format(self, value):
        if not self.issafe(value):
            return CalculatorResult(decimal=self.natural(value),
                                    hex=NOT_AVAILABLE,
                                    octal=NOT_AVAILABLE,
                                    binary=NOT_AVAILABLE,
                                    is_integer=False)
        sign = '-' if value < 0 else ''
        # The sign goes before the prefix: -0x10, never 0x-10.
        bases = {name: sign + prefix + format(abs(value), spec)
                 for name, prefix, spec
                 in type(self).BASES}
        return CalculatorResult(decimal=self.natural(value), is_integer=True,
                                **bases)

    def natural(self, value):
        '''
        Return the plain decimal form of a value.

        Integral floats drop their trailing .0, so 4 / 2 reads 2.
        '''
        if isinstance(value, int):
            try:
                return str(value)
            except ValueError:
                # Too many digits for int -> str conversion.
                return '{0:.16e}'.format(Decimal(value))
        if value == 0:
            return '0'
        text = repr(value)
        if text.endswith('.0'):
            text = text[:-2]
        return text
