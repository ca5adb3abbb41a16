"""
Position of the scanner inside the argument vector.

A cursor is an (index, offset) pair: `index` selects the argv element, `offset`
the character inside it. Offset 0 is the leading '-', so inside an option
cluster the offset is always 1 or more. Cursors are immutable; moving one
returns a new cursor.
"""
from typing import NamedTuple


class Cursor(NamedTuple):
    index: int = 1
    offset: int = 1

    def advance(self, count=1, /):
        """
        move `count` elements forward and rewind to the first option character.
        """
        return Cursor(self.index + count, 1)

    def shift(self, element, /):
        """
        move to the next character of `element`, or to the next element when
        the cluster is used up.
        """
        if self.offset + 1 >= len(element):
            return self.advance()
        return self._replace(offset=self.offset + 1)


__all__ = ("Cursor",)
