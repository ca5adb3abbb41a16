"""
Optscan scanner: walk an argument vector one short option at a time.

What this module provides
- Scanner: the getopt(3)-like state machine over (optstring, argv).
- Status: ACTIVE, DONE or FAILED; once left, ACTIVE is never entered again.
- NextOption / Failure / Exhausted: immutable results of Scanner.step().
- scan(optstring, argv): one-shot helper returning (options, remaining).

Scanning rules
- argv[0] is the program name and is never scanned.
- "--" ends option scanning and is consumed; what follows is positional.
- an element that is not '-' followed by a letter or digit ends option scanning
  and is left in place.
- options cluster ("-abc"); an arg-bearing option swallows the rest of its
  element ("-a42", "-abc" → a="bc") or else the next element:
  • required: the next element, whatever it looks like ("-a -b" → a="-b").
  • optional: the next element only when it is non-empty and not dash-led.
- an optstring starting with ':' makes every argument optional, so a missing
  required argument is only a fault without it.
- faults are sticky: after the first one the scanner reports nothing more.

Two driving styles
    scanner = Scanner("a:bz::v", ["prog", "-ba42", "-v", "--", "file"])

    # step protocol, getopt style
    while scanner.advance():
        option = scanner.decode()  # raises InvalidOptionError / MissingArgumentError

    # or plain iteration
    for option in scanner:
        ...

    scanner.remaining()  # ["file"]
"""
import logging
import sys
from enum import Enum
from typing import NamedTuple

from .cursor import Cursor
from .faults import InvalidOptionError, MissingArgumentError
from .grammar import Grammar, Policy
from .options import ParsedOption
from .utils import Unset, basename, isoptchar

logger = logging.getLogger("optscan.scanner")


class Status(Enum):
    ACTIVE = "active"
    DONE = "done"
    FAILED = "failed"


class NextOption(NamedTuple):
    option: ParsedOption


class Failure(NamedTuple):
    error: InvalidOptionError | MissingArgumentError


class Exhausted(NamedTuple):
    pass


class Scanner:
    """
    incremental short-option scanner.

    parameters
    - optstring: str, the option grammar (see optscan.grammar).
    - argv: sequence of str, argv[0] being the program name. It is kept by
      reference and never modified.

    raises
    - InvalidGrammarError when the optstring has a character that is neither an
      ASCII letter/digit nor ':'.
    """

    def __init__(self, optstring, argv, /):
        self._grammar = Grammar(optstring)
        self._argv = argv
        self._cursor = Cursor()
        self._status = Status.ACTIVE
        self._error = None
        self._pending = False
        self._progname = basename(argv[0]) if argv else ""

    @classmethod
    def fromsys(cls, optstring, /):
        """
        build a scanner over the running process' own arguments (sys.argv).
        """
        return cls(optstring, sys.argv)

    @property
    def grammar(self):
        return self._grammar

    @property
    def argv(self):
        return self._argv

    @property
    def cursor(self):
        return self._cursor

    @property
    def status(self):
        return self._status

    @property
    def error(self):
        return self._error

    @property
    def progname(self):
        return self._progname

    def advance(self):
        """
        tell whether an option is waiting at the cursor, without consuming it.

        it also settles the end of option scanning: "--" is consumed and the
        scanner becomes DONE; any other non-option element leaves the cursor
        where it is and the scanner becomes DONE.
        """
        self._pending = False
        if self._status is not Status.ACTIVE:
            return False
        if self._cursor.index >= len(self._argv):
            self._status = Status.DONE
            return False

        element = self._argv[self._cursor.index]
        if element == "--":
            self._cursor = self._cursor.advance()
            self._status = Status.DONE
            logger.debug("terminator at argv[%d], scanning stopped", self._cursor.index - 1)
            return False
        if len(element) < 2 or element[0] != "-" or not isoptchar(element[1]):
            self._status = Status.DONE
            logger.debug("positional %r at argv[%d], scanning stopped", element, self._cursor.index)
            return False

        self._pending = True
        return True

    def decode(self):
        """
        consume and return the option at the cursor.

        only valid right after advance() returned True.

        raises
        - InvalidOptionError: the character is not in the grammar.
        - MissingArgumentError: a required argument ran out of input.
        both are terminal: the fault is also kept in `error` and every later
        advance() returns False.
        """
        if not self._pending:
            raise RuntimeError("decode() called without a successful advance()")
        self._pending = False

        cursor = self._cursor
        element = self._argv[cursor.index]
        character = element[cursor.offset]

        spec = self._grammar.lookup(character)
        if spec is None:
            return self._fail(InvalidOptionError(character, index=cursor.index))

        if not spec.policy.argful:
            self._cursor = cursor.shift(element)
            logger.debug("option -%s", character)
            return ParsedOption(character)

        if cursor.offset + 1 < len(element):
            # the rest of the element is the argument, whatever it looks like
            self._cursor = cursor.advance()
            return self._found(character, element[cursor.offset + 1:])

        # a leading ':' in the optstring turns every argument optional
        optional = spec.policy is Policy.OPTIONAL or self._grammar.globals

        if cursor.index + 1 < len(self._argv):
            following = self._argv[cursor.index + 1]
            if not optional or (following and not following.startswith("-")):
                self._cursor = cursor.advance(2)
                return self._found(character, following)
            self._cursor = cursor.advance()
            logger.debug("option -%s without its optional argument", character)
            return ParsedOption(character)

        if not optional:
            return self._fail(MissingArgumentError(character, index=cursor.index))

        self._cursor = cursor.advance()
        logger.debug("option -%s without argument at end of input", character)
        return ParsedOption(character)

    def step(self):
        """
        run one advance/decode round and report it as a value.

        returns NextOption(option), Failure(error) once when scanning breaks,
        and Exhausted() whenever there is nothing more to report. Scan faults
        are never raised from here.
        """
        if not self.advance():
            return Exhausted()
        try:
            return NextOption(self.decode())
        except (InvalidOptionError, MissingArgumentError) as error:
            return Failure(error)

    def remaining(self):
        """
        return the argv elements left after scanning (positional arguments).

        this is a pure read of the cursor; before scanning ends it also includes
        whatever has not been looked at yet.
        """
        return list(self._argv[self._cursor.index:])

    def __iter__(self):
        """
        yield every option in order; a scan fault is raised when reached.
        """
        while self.advance():
            yield self.decode()

    def __repr__(self):
        return "Scanner(%r, %r)" % (self._grammar.source, self._argv)

    def __rich_repr__(self):
        yield "grammar", self._grammar
        yield "argv", self._argv
        yield "cursor", tuple(self._cursor)
        yield "status", self._status.value
        yield "error", self._error, None

    def _found(self, character, argument):
        logger.debug("option -%s with argument %r", character, argument)
        return ParsedOption(character, argument)

    def _fail(self, error):
        self._status = Status.FAILED
        self._error = error
        logger.debug("scan failed: %s", error)
        raise error


def scan(optstring, argv=Unset, /):
    """
    scan a whole argument vector at once.

    parameters
    - optstring: str, the option grammar.
    - argv: sequence of str; sys.argv when omitted.

    returns
    - (options, remaining): list of ParsedOption and list of positional arguments.

    raises
    - InvalidGrammarError, InvalidOptionError or MissingArgumentError.
    """
    scanner = Scanner.fromsys(optstring) if argv is Unset else Scanner(optstring, argv)
    options = list(scanner)
    return options, scanner.remaining()


__all__ = (
    "Status",
    "NextOption",
    "Failure",
    "Exhausted",
    "Scanner",
    "scan",
)
