'''
Shunting yard calculator.

Evaluates infix arithmetic over floats: numbers, + - * /, and parentheses.
Three stages, each usable on its own:

- Lexer: text to tokens.
- Parser: infix tokens to postfix tokens, by Dijkstra's shunting yard.
- Machine: postfix tokens to a float, on a stack.

No unary minus, no exponentiation, no functions, no variables. Not intended
to be a general purpose calculator!
'''

from .cli import CLI
from .lexer import Lexer
from .parser import Parser
from .machine import Machine
from .util import (ShuntingYardError, ScanError, ParseError, EvalError,
                   EmptyInput, NoTokensFound, InvalidCharacter,
                   EmptyTokenList, UnmatchedCloseParen, UnmatchedOpenParen,
                   InvalidNumber, EmptyExpression, InsufficientOperands,
                   DivisionByZero, TooManyOperands)


# None of these hold state; share them.
_lexer = Lexer()
_parser = Parser()
_machine = Machine()

scan = _lexer.scan
parse = convert = _parser.parse
evaluate = _machine.evaluate


def calculate(expression):
    '''
    Scan, parse, and evaluate an infix expression.

    Whichever stage fails first raises; nothing is returned partially.
    '''
    return evaluate(parse(scan(expression)))


__all__ = (
    'Lexer', 'Parser', 'Machine', 'CLI',
    'scan', 'parse', 'convert', 'evaluate', 'calculate',
    'ShuntingYardError', 'ScanError', 'ParseError', 'EvalError',
    'EmptyInput', 'NoTokensFound', 'InvalidCharacter',
    'EmptyTokenList', 'UnmatchedCloseParen', 'UnmatchedOpenParen',
    'InvalidNumber', 'EmptyExpression', 'InsufficientOperands',
    'DivisionByZero', 'TooManyOperands',
)
