import regex


OPERATORS = '+', '-', '*', '/'
LPAREN = '('
RPAREN = ')'
PARENTHESES = LPAREN, RPAREN

# 1, 12, 1. (notice trailing dot), 1.3, .2, but not . alone
NUMBER = r'''
          (?:
              [0-9]+
              (?:
                  \.
                  [0-9]*
              )?
          )|(?:
              \.
              [0-9]+
          )
          '''


class ShuntingYardError(Exception):
    '''
    Base of every error raised by scanning, parsing or evaluating.

    The message is always ``args[0]``.
    '''
    pass


class ScanError(ShuntingYardError):
    pass


class ParseError(ShuntingYardError):
    pass


class EvalError(ShuntingYardError):
    pass


class EmptyInput(ScanError):
    def __init__(self):
        super().__init__('empty expression')


class NoTokensFound(ScanError):
    def __init__(self):
        super().__init__('no valid tokens found')


class InvalidCharacter(ScanError):
    def __init__(self, char, position):
        super().__init__('invalid character {0!r} at position {1}'
                         .format(char, position))
        self.char = char
        # Code point index, not byte offset.
        self.position = position


class EmptyTokenList(ParseError):
    def __init__(self):
        super().__init__('empty token list')


class UnmatchedCloseParen(ParseError):
    def __init__(self):
        super().__init__("mismatched parentheses: unmatched ')'")


class UnmatchedOpenParen(ParseError):
    def __init__(self):
        super().__init__("mismatched parentheses: unmatched '('")


class InvalidNumber(ParseError, EvalError):
    '''
    Operand token that isn't a plain decimal literal.

    Raised by both the parser and the machine, hence both bases.
    '''
    def __init__(self, token):
        super().__init__('invalid number: {0}'.format(token))
        self.token = token


class EmptyExpression(EvalError):
    def __init__(self):
        super().__init__('empty expression')


class InsufficientOperands(EvalError):
    def __init__(self, operator):
        super().__init__('invalid expression: insufficient operands for '
                         'operator {0!r}'.format(operator))
        self.operator = operator


class DivisionByZero(EvalError):
    def __init__(self):
        super().__init__('division by zero')


class TooManyOperands(EvalError):
    def __init__(self):
        super().__init__('invalid expression: too many operands')


def to_number(token):
    '''
    Convert an operand token to float.

    Only plain decimal literals are accepted; float() alone would also take
    inf, nan, 1e5, 1_000 and non-ASCII digits.
    '''
    if not isinstance(token, str) or \
       regex.fullmatch(NUMBER, token, flags=regex.VERBOSE) is None:
        raise InvalidNumber(token)
    return float(token)
