from collections import deque
import logging
import operator

from .util import (OPERATORS, EmptyExpression, InsufficientOperands,
                   DivisionByZero, TooManyOperands, to_number)


logger = logging.getLogger(__name__)


def _truediv(left, right):
    '''
    True division, refusing exact zero divisors rather than producing inf.
    '''
    if right == 0.0:
        raise DivisionByZero()
    return operator.__truediv__(left, right)


class Machine:
    '''
    Arithmetic stack machine (RPN evaluator).

    Takes postfix tokens and runs them. Every call gets its own stack, so one
    machine can be shared freely.
    '''

    # Binary operators on the items of a machine, as f(left, right).
    BUILTINS = {
        '+': operator.__add__,
        '-': operator.__sub__,
        '*': operator.__mul__,
        '/': _truediv,
    }

    assert set(BUILTINS) == set(OPERATORS)

    def evaluate(self, postfix):
        '''
        Run postfix tokens and return the single resulting float.

        :param postfix: postfix tokens, e.g. from :meth:`Parser.parse`, or
                        built by hand.
        :raises EmptyExpression: no tokens at all.
        :raises InvalidNumber: operand that isn't a decimal literal.
        :raises InsufficientOperands: operator with fewer than two values
                                      stacked.
        :raises DivisionByZero: right operand of ``/`` is zero.
        :raises TooManyOperands: more than one value left at the end.
        '''
        postfix = list(postfix)
        if not postfix:
            raise EmptyExpression()

        stack = deque()
        for token in postfix:
            if token in OPERATORS:
                self._apply(token, stack)
            else:
                stack.append(to_number(token))

        if len(stack) != 1:
            raise TooManyOperands()
        result = stack.pop()
        logger.debug('evaluated %r to %r', postfix, result)
        return result

    def _apply(self, token, stack):
        '''
        Apply operator to the top two stack values, pushing the result.
        '''
        # Right operand was pushed last. If you don't reverse, you'll do 2/10
        # when you say 10 2 /.
        right, left = self._popstack(token, stack, n=2)
        stack.append(type(self).BUILTINS[token](left, right))

    def _popstack(self, token, stack, n=1):
        '''
        Pop specified number of values from stack, topmost first.

        Fails before popping anything if there aren't enough.
        '''
        if len(stack) < n:
            raise InsufficientOperands(token)
        return [stack.pop() for _ in range(n)]
