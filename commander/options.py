r"""
Commander option specifications.

Overview
- ValueType: the closed tag describing what, if anything, must follow an option
  on the command line (NO_VALUE, STRING, NUMBER, FLOAT). Each member knows its
  help label and how to coerce a raw token.
- OptionSpec: immutable description of one registrable option (short name,
  long name, description, value type).

- Introspection & representation
  • OptionType metaclass provides stable __repr__/__rich_repr__ and exposes the
    fields declared in __introspectable__ via read-only properties.

Validation highlights
- Names must match r"[^\W_]+(?:-[^\W_]+)*": no leading dash, no whitespace,
  no underscores; unicode letters and digits are allowed ("v", "if", "1").
- descr must be a string; it is trimmed and may be empty.
- type must be a ValueType member.

Quick example:
    >>> spec = OptionSpec("c", "count", "Amount of times to do something", ValueType.NUMBER)
    >>> spec.type.convert("5")
    5
"""
import functools
import operator
import re
import sys
from enum import Enum

from .utils import *


class ValueType(Enum):
    """
    closed set of payload kinds an option may carry.

    members
    - NO_VALUE: presence-only switch, nothing follows it.
    - STRING: the next token is kept verbatim.
    - NUMBER: the next token must be an integer ("5", "-12", "+3").
    - FLOAT: the next token must be a floating-point number ("1.5", "1e3", "inf").
    """
    NO_VALUE = "no-value"
    STRING = "string"
    NUMBER = "number"
    FLOAT = "float"

    @property
    def bearing(self):
        """True when a value must follow the option."""
        return self is not ValueType.NO_VALUE

    @property
    def label(self):
        """metavar shown in help ("<number>"), None for presence-only options."""
        return "<%s>" % self.value if self.bearing else None

    def convert(self, token, /):
        """
        coerce a raw token into this kind's payload.

        raises
        - ValueError when the token does not spell a value of this kind.
        - TypeError on NO_VALUE, which has no payload to convert.
        """
        match self:
            case ValueType.STRING:
                return token
            case ValueType.NUMBER:
                if not re.fullmatch(r"[+-]?[0-9]+", token):
                    raise ValueError("invalid number %r" % token)
                try:
                    return int(token)
                except ValueError:
                    # well-formed, but longer than sys.get_int_max_str_digits() allows
                    raise ValueError("number with %d digits exceeds the %d digits limit" % (
                        len(token.lstrip("+-")), sys.get_int_max_str_digits()
                    )) from None
            case ValueType.FLOAT:
                # float() tolerates padding and digit-group underscores, the command line does not
                if token != token.strip() or "_" in token:
                    raise ValueError("invalid float %r" % token)
                try:
                    return float(token)
                except ValueError:
                    raise ValueError("invalid float %r" % token) from None
        raise TypeError("%s options do not carry a value" % self.value)


class OptionType(type):
    """
    Metaclass that turns specs into read-only, introspectable records.

    Responsibilities
    - Expose every name listed in __introspectable__ as a read-only property
      backed by "_{name}" (see mirror()).
    - Provide stable __repr__/__rich_repr__ implementations for diagnostics.
    - Derive __typename__ from the class name ("OptionSpec" -> "option-spec")
      for use in messages.
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Example
            - option-spec(short='v', long='version', descr='...', type=<ValueType.NO_VALUE: 'no-value'>)
            """
            return f"{type(self).__typename__}({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in type(self).__introspectable__:
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_name(cls, kind, name, /):
    """
    Internal: validate one short/long option name and return it trimmed.

    Raises
    - TypeError: when the name is not a string.
    - ValueError: when the name is empty or not a valid option name.
    """
    if not isinstance(name, str):
        raise TypeError(f"{cls.__typename__} {kind} name must be a string")
    elif not (name := name.strip()):
        raise ValueError(f"{cls.__typename__} {kind} name cannot be empty")
    elif not re.fullmatch(r"[^\W_]+(?:-[^\W_]+)*", name):
        raise ValueError(f"{cls.__typename__} {kind} name {name!r} must be written without dashes prefix or spaces")
    return name


class OptionSpec(metaclass=OptionType):
    """
    Named option specification.

    Properties
    - short: str, the short token ("v" matches "-v").
    - long: str, the long token ("version" matches "--version").
    - descr: str, human-readable text for help output (may be empty).
    - type: ValueType, what must follow the option on the command line.

    Specs are immutable and compare by identity; uniqueness of names across
    a registry is enforced by Commander.add_option, not here.
    """

    __introspectable__ = (
        "short",
        "long",
        "descr",
        "type",
    )

    __slots__ = ("_short", "_long", "_descr", "_type")

    def __init__(self, short, long, descr="", type=ValueType.NO_VALUE):
        if not isinstance(descr, str):
            raise TypeError(f"{OptionSpec.__typename__} 'descr' must be a string")
        if not isinstance(type, ValueType):
            raise TypeError(f"{OptionSpec.__typename__} 'type' must be a ValueType member")
        self._short = _sanitize_name(OptionSpec, "short", short)
        self._long = _sanitize_name(OptionSpec, "long", long)
        self._descr = descr.strip()
        self._type = type

    def __setattr__(self, name, value):
        if hasattr(self, "_type"):
            raise AttributeError(f"{type(self).__typename__} is immutable")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__typename__} is immutable")

    def matches(self, name, /):
        """True when name is this spec's short or long name."""
        return name == self._short or name == self._long


__all__ = (
    "ValueType",
    "OptionSpec",
)
