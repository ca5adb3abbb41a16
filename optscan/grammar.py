"""
Optscan grammar: compile an optstring into option descriptors.

The optstring mini-language
- each ASCII letter or digit declares an option character.
- one ':' after a character   → the option requires an argument.
- two ':' after a character   → the option takes an optional argument.
- a ':' at the very beginning → every argument is optional when the input runs out
  (the global optional fallback).

Examples
    >>> grammar = Grammar("a:bz::v")
    >>> [str(spec) for spec in grammar]
    ['a:', 'b', 'z::', 'v']
    >>> grammar.lookup("z").policy
    <Policy.OPTIONAL: 2>

Duplicates are kept in declaration order and lookup returns the first one, so
"aa:" declares a flag-only 'a'.
"""
import logging
from enum import IntEnum
from typing import NamedTuple

from .faults import InvalidGrammarError
from .utils import isoptchar

logger = logging.getLogger("optscan.grammar")


class Policy(IntEnum):
    """
    how an option locates its argument.
    """
    NONE     = 0
    REQUIRED = 1
    OPTIONAL = 2

    @property
    def argful(self):
        """
        True for the arg-bearing policies (required and optional).
        """
        return self is not Policy.NONE


class OptionSpec(NamedTuple):
    character: str
    policy: Policy = Policy.NONE

    def __str__(self):
        return self.character + ":" * self.policy


class Grammar:
    """
    compiled, immutable view over an optstring.

    attributes
    - source: the optstring as given.
    - specs: tuple of OptionSpec in declaration order.
    - globals: True when the optstring starts with ':'.
    """
    __slots__ = ("_source", "_specs", "_globals")

    def __init__(self, optstring, /):
        if not isinstance(optstring, str):
            raise TypeError("Grammar() argument must be a string")

        for character in optstring:
            if character != ":" and not isoptchar(character):
                raise InvalidGrammarError(character)

        specs = []
        globals = optstring.startswith(":")
        index = 1 if globals else 0
        while index < len(optstring):
            character = optstring[index]
            index += 1
            if character == ":":
                # stray colons past the second one carry no meaning
                continue
            colons = 0
            while colons < 2 and index < len(optstring) and optstring[index] == ":":
                colons += 1
                index += 1
            specs.append(OptionSpec(character, Policy(colons)))

        self._source = optstring
        self._specs = tuple(specs)
        self._globals = globals
        logger.debug("compiled optstring %r into %s (globals=%s)", optstring, [str(spec) for spec in specs], globals)

    @property
    def source(self):
        return self._source

    @property
    def specs(self):
        return self._specs

    @property
    def globals(self):
        return self._globals

    def lookup(self, character, /):
        """
        return the first spec declared for `character`, or None when undeclared.

        the scan is linear on purpose: duplicate declarations resolve to the
        earliest one.
        """
        for spec in self._specs:
            if spec.character == character:
                return spec
        return None

    def __contains__(self, character):
        return self.lookup(character) is not None

    def __iter__(self):
        return iter(self._specs)

    def __len__(self):
        return len(self._specs)

    def __eq__(self, other):
        if not isinstance(other, Grammar):
            return NotImplemented
        return self._specs == other._specs and self._globals == other._globals

    def __hash__(self):
        return hash((self._specs, self._globals))

    def __repr__(self):
        return "Grammar(%r)" % self._source

    def __rich_repr__(self):
        yield "specs", tuple(str(spec) for spec in self._specs)
        yield "globals", self._globals, False


__all__ = (
    "Policy",
    "OptionSpec",
    "Grammar",
)
