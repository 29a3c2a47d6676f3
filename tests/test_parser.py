'''
Shunting yard parser tests
'''

import regex

from shuntingyard.util import (ParseError, EvalError, EmptyTokenList,
                               UnmatchedCloseParen, UnmatchedOpenParen,
                               InvalidNumber)

from pytest import raises, mark


@mark.parametrize('tokens, expected', [
    ('2 + 3', '2 3 +'),
    ('2 + 3 * 4', '2 3 4 * +'),
    ('10 - 6 / 2', '10 6 2 / -'),
    ('( 2 + 3 ) * 4', '2 3 + 4 *'),
    ('( ( 2 + 3 ) * 4 ) - 5', '2 3 + 4 * 5 -'),
    ('( 2 + 3 ) * ( 4 + 1 )', '2 3 + 4 1 + *'),
    ('1 + 2 + 3 + 4 + 5', '1 2 + 3 + 4 + 5 +'),
    ('8 / 4 / 2', '8 4 / 2 /'),
    ('8 - 4 + 2', '8 4 - 2 +'),
    ('2 * 3 - 4 / 5', '2 3 * 4 5 / -'),
    ('7', '7'),
])
def test_parse(parser, tokens, expected):
    assert parser.parse(tokens.split()) == expected.split()


def test_numbers_kept_as_written(parser):
    assert parser.parse(['1.50', '+', '.5', '*', '7.']) == \
        ['1.50', '.5', '7.', '*', '+']


def test_convert_is_parse(parser):
    assert parser.convert(['2', '*', '3']) == ['2', '3', '*']


def test_accepts_any_iterable(parser):
    assert parser.parse(iter(['2', '-', '1'])) == ['2', '1', '-']


def test_no_parentheses_out(parser):
    postfix = parser.parse('( ( 1 ) + ( ( 2 ) ) )'.split())
    assert postfix == ['1', '2', '+']


def test_unary_minus_isnt(parser):
    # Comes out postfix, but unevaluable.
    assert parser.parse(['-', '5']) == ['5', '-']


def test_empty(parser):
    with raises(EmptyTokenList, match='empty token list'):
        parser.parse([])


def test_extra_right(parser):
    with raises(UnmatchedCloseParen, match=regex.escape("unmatched ')'")):
        parser.parse(['(', '2', '+', '3', ')', ')'])


def test_leading_right(parser):
    with raises(UnmatchedCloseParen):
        parser.parse([')', '2', '+', '3'])


def test_extra_left(parser):
    with raises(UnmatchedOpenParen, match=regex.escape("unmatched '('")):
        parser.parse(['(', '2', '+', '3'])


def test_extra_left_under_operators(parser):
    with raises(UnmatchedOpenParen):
        parser.parse(['(', '(', '2', '+', '3', ')'])


@mark.parametrize('token', ['abc', '1.2.3', '.', 'inf', 'nan', '1e5',
                            '1_000', ' 1', '\N{ARABIC-INDIC DIGIT ONE}'])
def test_invalid_number(parser, token):
    with raises(InvalidNumber,
                match=regex.escape('invalid number: ' + token)) as excinfo:
        parser.parse([token, '+', '2'])
    assert excinfo.value.token == token


def test_first_error_wins(parser):
    with raises(InvalidNumber):
        parser.parse(['x', ')'])
    with raises(UnmatchedCloseParen):
        parser.parse([')', 'x'])


def test_error_kinds(parser):
    with raises(ParseError):
        parser.parse([')'])
    # Shared with the machine.
    with raises(EvalError):
        parser.parse(['x'])
