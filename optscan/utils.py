"""
Optscan utilities (internal helpers, carefully exposed)

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None.
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, but preserve legitimate falsey values like None/0/"".

- isoptchar(character)
  • The option alphabet: ASCII letters and digits.

- basename(path)
  • Final path segment of argv[0], with the slash handling shells expect.

Stability and contract
- Names not in __all__ are internal and may change without notice.
"""
import functools
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and "".
    - Printable: repr(Unset) -> "Unset" for friendly diagnostics.
    - Non-subclassable: this type is sealed; do not subclass.
    - Singleton per process: UnsetType() always yields the same instance.
    """

    def __or__(self, other, /):
        """
        Support PEP 604 unions in annotations and isinstance checks (e.g., Unset | str).
        """
        try:
            return type(self) | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        """
        Support reversed PEP 604 unions when Unset appears on the right.
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


Unset = UnsetType()


def coalesce(object, default=None, /):
    """
    Resolve an internal Unset sentinel to a concrete default.

    Falsey values like None, 0 or "" are preserved as-is; only Unset is replaced.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None
    """
    return object if object is not Unset else default


def isoptchar(character, /):
    """
    Tell whether a single character may name an option (ASCII letter or digit).
    """
    return len(character) == 1 and character.isascii() and character.isalnum()


def basename(path, /):
    """
    Return the last element of a slash-separated path.

    rules
    - trailing slashes are removed before the last element is taken.
    - an empty path yields "." and a path of only slashes yields "/".
    """
    if not path:
        return "."
    path = path.rstrip("/")
    if not path:
        return "/"
    return path.rpartition("/")[2]


__all__ = (
    "UnsetType",
    "Unset",
    "coalesce",
    "isoptchar",
    "basename",
)
