"""
Optscan faults (errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every scanning fault.
- ScanException: base type that carries message + options and knows how to render
  itself in a friendly, lowercased, and actionable way.
- InvalidGrammarError / InvalidOptionError / MissingArgumentError: the taxonomy.
- report(): central entry point for a front-end to print a fault on stderr.

Lifecycle
- InvalidGrammarError is raised while a Scanner is being built; nothing is scanned.
- InvalidOptionError and MissingArgumentError are terminal for a Scanner: they are
  handed to the caller once and kept as its sticky status afterwards.

Integration
- The scanner never prints and never exits; front-ends catch a fault and decide,
  typically by calling report(fault, prog=scanner.progname).
"""
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used by the scanner (stable identifiers).

    grouping
    - grammar (2110x): INVALID_GRAMMAR
    - scanning (2111x): INVALID_OPTION, MISSING_ARGUMENT
    """
    # --- grammar errors (21xxx) ---
    INVALID_GRAMMAR  = 21101

    # --- scanning errors (21xxx) ---
    INVALID_OPTION   = 21111
    MISSING_ARGUMENT = 21112

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ScanException(Exception):
    """
    base of every scanning fault.

    attributes
    - message: the one-line, getopt-style description (also str(fault)).
    - options: read-only mapping with at least character, code, title and hint.
    - character: the offending character (shortcut into options).

    two faults compare equal when they share the type and the character.
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def character(self):
        return self.options.get("character")

    @property
    def code(self):
        return self.options.get("code")

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.character == other.character

    def __hash__(self):
        return hash((type(self), self.character))

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.character)

    def __str__(self):
        return str(self.message)

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", True)
        fancy = self.options.get("fancy", False)

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        prog = text(getattr(main, "__prog__", self.options.get("prog") or "optscan"), styler("prog-name"))

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(self.code.normalize(), styler("code")),
            " | ",
            text(self.options["title"].title(), styler("error-title")),
            " ]"
        )
        message = text(self.message, styler("error-message"))
        hint = Text.assemble(text(" → ", styler("hint-arrow")), text(self.options["hint"], styler("hint")))

        if fancy:
            return Panel(Group(message, hint), title=header, title_align="left")

        return Group(header, message, hint)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class InvalidGrammarError(ScanException, ValueError):
    def __init__(self, character, /, **options):
        super().__init__(
            "invalid optstring character: %r" % character,
            **{
                "title": "invalid optstring",
                "code": FaultCode.INVALID_GRAMMAR,
                "hint": "option characters must be ascii letters or digits, optionally followed by ':' or '::'",
                **options,
                "character": character,
            }
        )

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.character, **{**self.options, **overrides})


class InvalidOptionError(ScanException):
    def __init__(self, character, /, **options):
        super().__init__(
            "unknown option: -%s" % character,
            **{
                "title": "unknown option",
                "code": FaultCode.INVALID_OPTION,
                "hint": "remove '-%s' or pass it after '--' to use it as a positional argument" % character,
                **options,
                "character": character,
            }
        )

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.character, **{**self.options, **overrides})


class MissingArgumentError(ScanException):
    def __init__(self, character, /, **options):
        super().__init__(
            "option -%s requires an argument" % character,
            **{
                "title": "missing argument",
                "code": FaultCode.MISSING_ARGUMENT,
                "hint": "add a value right after the option (for example: -%s<value> or -%s <value>)" % (character, character),
                **options,
                "character": character,
            }
        )

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.character, **{**self.options, **overrides})


def report(fault, /, **options):
    """
    print a fault on stderr with the given presentation options.

    contract
    - fault must be a ScanException.
    - options (prog, fancy, colorful) are merged into a copy of the fault via
      __replace__; the original fault is left untouched.
    - reporting never raises the fault and never exits the process.
    """
    if not isinstance(fault, ScanException):
        raise TypeError("report() argument must be a scan exception")
    console.print(fault.__replace__(**options))


__all__ = (
    "FaultCode",
    "ScanException",
    "InvalidGrammarError",
    "InvalidOptionError",
    "MissingArgumentError",
    "report",
)
