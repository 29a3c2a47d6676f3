from functools import reduce
import logging
import operator

import regex

from .util import (OPERATORS, LPAREN, RPAREN, EmptyInput, NoTokensFound,
                   InvalidCharacter)


logger = logging.getLogger(__name__)


class Lexer:
    '''
    Lexer for the infix arithmetic *regular* grammar.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Any run of digits and decimal points. 1.2.3 lexes fine, as one lexeme;
    # whether it's a number is the parser's problem.
    NUMBER = r'''
              [0-9.]+
              '''

    assert not [operator
                for operator
                in OPERATORS
                if len(operator) != 1]
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, OPERATORS)) + r')'
    PAREN = r'(?:' + regex.escape(LPAREN) + r'|' + regex.escape(RPAREN) + r')'
    # Unicode whitespace, not just ASCII.
    SPACE = r'\s+'

    # Immediate, as in immediately complete lexeme
    IMMEDIATE = r'(?<operator>' + OPERATOR + r')|' \
                r'(?<paren>' + PAREN + r')|' \
                r'(?<space>' + SPACE + r')'
    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<immediate>' + IMMEDIATE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and yield all lexemes, whitespace included.

        Doesn't yield incomplete or incorrect lexemes, stopping on first bad.

        :raises InvalidCharacter: on the first character no lexeme matches.
        '''
        length = len(line)
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            # Python strings index by code point, so this is one too.
            raise InvalidCharacter(line[0], length - len(line))

    def scan(self, expression):
        '''
        Split an infix expression into tokens: numbers, operators, parens.

        Whitespace separates tokens but is otherwise dropped, so ``1+2`` and
        ``1 + 2`` scan the same.

        :raises EmptyInput: expression is the empty string.
        :raises NoTokensFound: expression is nothing but whitespace.
        :raises InvalidCharacter: anything else unexpected.
        '''
        if not expression:
            raise EmptyInput()
        tokens = [match.group(0)
                  for match
                  in self.lex(expression)
                  if self.isfeedable(match)]
        if not tokens:
            raise NoTokensFound()
        logger.debug('scanned %r into %r', expression, tokens)
        return tokens

    def isfeedable(self, match):
        '''
        Return True if lexeme can be fed to the parser.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def matchedgroups(self, match):
        '''
        Return the lexeme's matched named groups.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value and key != 'immediate'}
