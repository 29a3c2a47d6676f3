from os import path
from contextlib import contextmanager
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .util import ShuntingYardError
from .lexer import Lexer
from .parser import Parser
from .machine import Machine


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt, history_file=None):
        self.prompt = prompt
        self.history_file = history_file

    def __iter__(self):
        history = None
        if self.history_file is not None:
            history = FileHistory(path.expanduser(self.history_file))
        try:
            session = PromptSession(message=self.prompt,
                                    history=history,
                                    enable_suspend=True,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the shunting yard calculator.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.shuntingyard_history'
    DEFAULT_PRECISION = None

    def dumper(self):
        '''
        Dump tokens and postfix form of every expression.
        '''
        print('<expression>\t<tokens>\t<postfix>')
        for expression in self._expressions():
            with self._reporting():
                tokens = self.lexer.scan(expression)
                postfix = self.parser.parse(tokens)
                print(repr(expression),
                      ' '.join(tokens),
                      ' '.join(postfix),
                      sep='\t')

    def executor(self):
        '''
        Evaluate every expression, printing results.
        '''
        for expression in self._expressions():
            with self._reporting():
                tokens = self.lexer.scan(expression)
                postfix = self.parser.parse(tokens)
                print(self._round(self.machine.evaluate(postfix)))

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(self.lexer.LEXEME)

    def _round(self, n):
        '''
        Round number to precision (on output) if set to round.
        '''
        if self.args.precision is None:
            return n
        else:
            return round(n, self.args.precision)

    @contextmanager
    def _reporting(self):
        '''
        Report and count calculator errors, then carry on with the next one.

        Anything else propagates.
        '''
        try:
            yield
        except ShuntingYardError as e:
            self.failures += 1
            print(e.args[0], file=sys.stderr)
            logger.debug('expression failed', exc_info=True)

    def _expressions(self):
        '''
        Yield expressions from the command line, or else input lines.

        Blank input lines are skipped; blank command line arguments aren't.
        '''
        if self.args.expressions is not None:
            yield from self.args.expressions
            return
        for line in self._prompting_input():
            line = line.rstrip('\r\n')
            if line.strip():
                yield line

    def _prompting_input(self):
        '''
        Return prompting stdin, or plain stdin.

        Prompts if either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           sys.stdin.isatty() and sys.stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history_file=self.HISTORY_FILE)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.lexer = Lexer()
        self.parser = Parser()
        self.machine = Machine()
        self.failures = 0
        self.argument_parser = ArgumentParser(
            description='Shunting yard calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=int,
                                          default=self.DEFAULT_PRECISION,
                                          help='round results to this many '
                                               'decimal places')
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
        self.argument_parser.set_defaults(action=self.executor)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.

        Returns the exit status: 1 if any expression failed, else 0.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(
            level=logging.DEBUG if self.args.verbose else logging.WARNING,
            format='%(name)s: %(levelname)s: %(message)s')
        self.failures = 0
        try:
            self.args.action()
        except KeyboardInterrupt:
            return 1
        return 1 if self.failures else 0


def main():
    sys.exit(CLI().run())
