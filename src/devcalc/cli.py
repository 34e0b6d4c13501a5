from os import isatty
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import sys
import traceback

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter

from .util import CalculatorError
from .calculator import Calculator
from .formatter import Formatter, NOT_AVAILABLE
from .lexer import Lexer


def strip_prefix(text):
    '''
    Drop the 0x/0o/0b prefix of a formatted number, keeping any sign.
    '''
    if text == NOT_AVAILABLE:
        return text
    sign = '-' if text.startswith('-') else ''
    return sign + text[len(sign) + 2:]


class InteractiveInput:
    '''
    One expression per prompt, until EOF (^D).
    '''
    TOOLBAR = 'AND OR XOR NOT SHL SHR  0x 0o 0b  ^D quits'
    # Offer both spellings; the lexer doesn't care about case.
    COMPLETER = WordCompleter(sorted(Lexer.WORDS) +
                              sorted(word.lower() for word in Lexer.WORDS))

    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        session = PromptSession(message=self.prompt,
                                completer=self.COMPLETER,
                                complete_while_typing=False,
                                bottom_toolbar=self.TOOLBAR,
                                enable_suspend=True)
        try:
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '
    # Output labels, in print order.
    LABELS = [
        ('dec', 'decimal'),
        ('hex', 'hex'),
        ('oct', 'octal'),
        ('bin', 'binary'),
    ]
    SWITCHES = [
        ('-v', '--verbose', 'show tracebacks of errors'),
        ('-d', '--decode', 'read single literals, not expressions'),
        ('-n', '--no-prefix', 'omit 0x, 0o and 0b prefixes'),
        ('-u', '--unbounded', 'show integers of any size in all bases'),
    ]

    def _lines(self):
        '''
        Yield the non-blank input lines, newlines stripped.
        '''
        for line in self.args.expressions:
            line = line.strip()
            if line:
                yield line

    def dumper(self):
        '''
        Dump the tokens of every line.
        '''
        lexer = Lexer()
        print('<kind>\t<repr(text)>')
        for line in self._lines():
            try:
                for token in lexer.tokenize(line):
                    print(token.kind.name, repr(token.text), sep='\t')
            except CalculatorError as e:
                self._report(e)

    def executor(self):
        '''
        Evaluate every line, printing its value in all bases.
        '''
        calculator = Calculator(max_safe_integer=None if self.args.unbounded
                                else Formatter.MAX_SAFE_INTEGER)
        run = calculator.decode if self.args.decode else calculator.evaluate
        for line in self._lines():
            try:
                result = run(line)
            except CalculatorError as e:
                self._report(e)
                continue
            for label, field in type(self).LABELS:
                text = getattr(result, field)
                if self.args.no_prefix and field != 'decimal':
                    text = strip_prefix(text)
                print(label, text, sep='\t')

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _report(self, error):
        if self.args.verbose:
            traceback.print_exc()
        print(error.message, file=sys.stderr)

    def _prompting_input(self):
        '''
        Return prompting input, or plain stdin.

        Prompts if either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Programmer calculator: evaluate expressions and '
                        'show the result in decimal, hex, octal and binary')
        for short_, long_, help_ in type(self).SWITCHES:
            self.argument_parser.add_argument(short_, long_,
                                              action='store_true',
                                              help=help_)
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=sys.stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is sys.stdin:
            self.args.expressions = self._prompting_input()
        else:
            # -e 1 + 2 is one expression, not three.
            self.args.expressions = [' '.join(self.args.expressions)]
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
