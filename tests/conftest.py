from pytest import Item, fixture

from devcalc import Lexer, Parser


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!)
    print('actual', item.name + ':' + str(lineno),
          # Get rid of full-diff, -vv for full diff, etc.
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def lexer() -> Lexer:
    return Lexer()


@fixture
def value(lexer):
    '''
    Raw int or float an expression evaluates to, before formatting.
    '''
    def evaluate(text, **kwargs):
        return Parser(lexer.tokenize(text), **kwargs).parse()
    return evaluate
