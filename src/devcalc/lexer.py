from enum import Enum
from functools import reduce
from typing import NamedTuple
import operator

import regex

from .util import CalculatorError, ErrorKind


class TokenKind(Enum):
    NUMBER = 'number'
    PLUS = '+'
    MINUS = '-'
    STAR = '*'
    SLASH = '/'
    PERCENT = '%'
    AMP = '&'
    PIPE = '|'
    CARET = '^'
    TILDE = '~'
    SHL = '<<'
    SHR = '>>'
    LPAREN = '('
    RPAREN = ')'
    END = 'end'


class Token(NamedTuple):
    kind: TokenKind
    # Raw source slice. Base prefix included for numbers.
    text: str


class Lexer:
    '''
    Lexer for the calculator's infix grammar.

    Holds no state between calls; one instance can be shared.
    '''
    # Prefixed integers. The prefix letter is kept in the token text.
    HEX = r'0[xX][0-9a-fA-F]+'
    BINARY = r'0[bB][01]+'
    OCTAL = r'0[oO][0-7]+'
    # 1, 12, 1.5, 1. (notice trailing dot), but not .5
    DECIMAL = r'[0-9]+(?:\.[0-9]*)?'
    # A base prefix with no digits of its base after it. Must be tried after
    # the prefixed integers, and before DECIMAL eats the leading 0.
    BAD_PREFIX = r'0(?<prefix>[xXbBoO])'

    BASES = {
        'x': 'hexadecimal',
        'b': 'binary',
        'o': 'octal',
    }

    SYMBOLS = {kind.value: kind
               for kind
               in TokenKind
               if kind not in {TokenKind.NUMBER, TokenKind.END}}
    # Word spellings of bitwise operators. Looked up upper-cased.
    WORDS = {
        'AND': TokenKind.AMP,
        'OR': TokenKind.PIPE,
        'XOR': TokenKind.CARET,
        'NOT': TokenKind.TILDE,
        'SHL': TokenKind.SHL,
        'SHR': TokenKind.SHR,
    }

    assert all(word.isalpha() and word.isupper() for word in WORDS)
    # Longest first, so << isn't read as two separate characters.
    OPERATOR = r'(?:' + r'|'.join(
        map(regex.escape, sorted(SYMBOLS, key=len, reverse=True))) + r')'
    # Always the maximal run, so words never match inside a longer name.
    WORD = r'[A-Za-z]+'
    SPACE = r'\s+'

    NUMBER = r'''
              (?<hex>{HEX})
              |
              (?<binary>{BINARY})
              |
              (?<octal>{OCTAL})
              |
              (?<badprefix>{BAD_PREFIX})
              |
              (?<decimal>{DECIMAL})
              '''.format(HEX=HEX, BINARY=BINARY, OCTAL=OCTAL,
                         BAD_PREFIX=BAD_PREFIX, DECIMAL=DECIMAL)
    # All possible lexemes. Alternation is ordered; first match wins.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<word>' + WORD + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)
    PATTERN = regex.compile(LEXEME, flags=FLAGS)

    def lex(self, line):
        '''
        Take a line and yield all lexeme matches, whitespace included.

        Raises on the first character that can't start a lexeme, or on a base
        prefix with no digits after it.
        '''
        position = 0
        while position < len(line):
            match = type(self).PATTERN.match(line, position)
            if match is None:
                raise CalculatorError(
                    ErrorKind.UNEXPECTED_CHARACTER,
                    'Unexpected character: {0}'.format(line[position]))
            if match.group('prefix'):
                base = type(self).BASES[match.group('prefix').lower()]
                raise CalculatorError(ErrorKind.INVALID_LITERAL,
                                      'Invalid {0} number'.format(base),
                                      base=base)
            yield match
            position = match.end()

    def matchedgroups(self, match):
        '''
        Return the named groups that took part in a lexeme match.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}

    def token(self, match):
        '''
        Convert one lexeme match to a Token, or None for whitespace.
        '''
        groups = self.matchedgroups(match)
        if 'space' in groups:
            return None
        elif 'number' in groups:
            return Token(TokenKind.NUMBER, groups['number'])
        elif 'operator' in groups:
            return Token(type(self).SYMBOLS[groups['operator']],
                         groups['operator'])
        word = groups['word']
        kind = type(self).WORDS.get(word.upper())
        if kind is None:
            raise CalculatorError(ErrorKind.UNEXPECTED_CHARACTER,
                                  'Unexpected word: {0}'.format(word))
        return Token(kind, word)

    def tokenize(self, line):
        '''
        Return the tokens of a line, terminated by an END token.
        '''
        tokens = [token
                  for token
                  in map(self.token, self.lex(line))
                  if token is not None]
        tokens.append(Token(TokenKind.END, ''))
        return tokens


def tokenize(line):
    return Lexer().tokenize(line)
