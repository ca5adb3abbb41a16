"""
Parsed option values.

A ParsedOption is what the scanner hands back for each recognized option: the
option character and, when one was found, its argument text. An empty argument
is folded into "no argument", so `-a ""` and `-a` at the end of argv look
the same to callers.

The numeric accessors are thin: they run the standard conversion on the
argument text (or on "" when there is none) and let its ValueError through.
"""
from .utils import Unset, coalesce

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1


class ParsedOption:
    __slots__ = ("_character", "_argument")

    def __init__(self, character, argument=Unset, /):
        if not isinstance(character, str) or len(character) != 1:
            raise TypeError("ParsedOption() character must be a single-character string")
        argument = coalesce(argument, None)
        if argument is not None and not isinstance(argument, str):
            raise TypeError("ParsedOption() argument must be a string")
        self._character = character
        # "" and absent are indistinguishable for callers
        self._argument = argument or None

    @property
    def character(self):
        return self._character

    @property
    def argument(self):
        return self._argument

    @property
    def hasarg(self):
        return self._argument is not None

    def int(self):
        """
        parse the argument as a signed base-10 integer that fits in 64 bits.
        """
        value = int(str(self), 10)
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError("value out of range for a 64-bit integer: %r" % str(self))
        return value

    def uint(self):
        """
        parse the argument as an unsigned base-10 integer that fits in 64 bits.
        """
        text = str(self)
        if text.lstrip()[:1] in ("-", "+"):
            raise ValueError("invalid literal for unsigned int() with base 10: %r" % text)
        value = int(text, 10)
        if value > UINT64_MAX:
            raise ValueError("value out of range for a 64-bit unsigned integer: %r" % text)
        return value

    def float(self):
        return float(str(self))

    def __str__(self):
        return self._argument or ""

    def __eq__(self, other):
        if not isinstance(other, ParsedOption):
            return NotImplemented
        return (self._character, self._argument) == (other._character, other._argument)

    def __hash__(self):
        return hash((self._character, self._argument))

    def __repr__(self):
        if self._argument is None:
            return "ParsedOption(%r)" % self._character
        return "ParsedOption(%r, %r)" % (self._character, self._argument)

    def __rich_repr__(self):
        yield self._character
        yield "argument", self._argument, None


__all__ = ("ParsedOption",)
