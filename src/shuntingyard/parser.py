from collections import deque
import logging

from .util import (OPERATORS, LPAREN, RPAREN, EmptyTokenList,
                   UnmatchedCloseParen, UnmatchedOpenParen, to_number)


logger = logging.getLogger(__name__)


class Parser:
    '''
    Infix to postfix (RPN) converter, by Dijkstra's shunting yard.

    Multiplication and division bind tighter than addition and subtraction.
    Operators of equal precedence are left-associative: an operator on the
    stack is popped unless its precedence is strictly less than the
    incoming one.

    Holds no state between calls.
    '''

    PRECEDENCE = {
        '+': 1,
        '-': 1,
        '*': 2,
        '/': 2,
    }

    assert set(PRECEDENCE) == set(OPERATORS)

    def parse(self, tokens):
        '''
        Convert infix tokens to postfix tokens.

        Numbers are passed through as their original text. Parentheses never
        appear in the output.

        :param tokens: infix tokens, e.g. from :meth:`Lexer.scan`.
        :raises EmptyTokenList: no tokens at all.
        :raises InvalidNumber: operand that isn't a decimal literal.
        :raises UnmatchedCloseParen: ``)`` with no ``(`` to close.
        :raises UnmatchedOpenParen: ``(`` still open at the end.
        '''
        tokens = list(tokens)
        if not tokens:
            raise EmptyTokenList()

        output = []
        # Only operators and '(' ever go on here.
        stack = deque()
        for token in tokens:
            if token in OPERATORS:
                self._shunt(token, stack, output)
            elif token == LPAREN:
                stack.append(token)
            elif token == RPAREN:
                self._close(stack, output)
            else:
                # Validated, but kept as written.
                to_number(token)
                output.append(token)

        while stack:
            top = stack.pop()
            if top == LPAREN:
                raise UnmatchedOpenParen()
            output.append(top)

        logger.debug('converted %r to %r', tokens, output)
        return output

    convert = parse

    def _shunt(self, token, stack, output):
        '''
        Pop operators binding at least as tight as token, then push token.
        '''
        precedence = type(self).PRECEDENCE
        while stack and stack[-1] != LPAREN and \
              not precedence[stack[-1]] < precedence[token]:
            output.append(stack.pop())
        stack.append(token)

    def _close(self, stack, output):
        '''
        Pop operators up to and including the matching '(', dropping it.
        '''
        while stack:
            top = stack.pop()
            if top == LPAREN:
                return
            output.append(top)
        raise UnmatchedCloseParen()
