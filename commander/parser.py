"""
Commander parsing layer: match raw tokens against registered option specs.

What this module provides
- MatchedValue: one option as actually found on the command line (the spec it
  satisfies, the name as typed, and its coerced payload).
- parse(options, tokens): pure function from (registry, argument list) to an
  ordered ParseResult (a tuple of MatchedValue).

Token convention
- "--name" is looked up among long names first, then among short names.
- "-name" is looked up among short names first, then among long names.
- Tokens that do not start with "-" (and a bare "-" or "--") are ignored.
- Tokens that name no registered option are ignored as well.

Value consumption
- Presence-only (NO_VALUE) options consume nothing.
- Value-bearing options consume the immediately following token, even when it
  starts with "-" (so "-c -5" yields -5).

Faults
- MissingValueError: a value-bearing option is the last token.
- InvalidValueError: a NUMBER/FLOAT value does not coerce.
- RepeatedOptionWarning: an option appears more than once (every occurrence
  is kept; Commander getters resolve to the last one).
"""
import functools
import warnings
from collections import deque, namedtuple

from .faults import *
from .options import ValueType


class MatchedValue(namedtuple("MatchedValue", ("option", "input", "value"))):
    """
    one entry of a ParseResult.

    fields
    - option: the OptionSpec this entry satisfies.
    - input: the option name exactly as typed, without its dashes.
    - value: None for NO_VALUE options, else a str, int or float matching option.type.
    """
    __slots__ = ()

    @property
    def name(self):
        """canonical (long) name of the matched option."""
        return self.option.long

    def __rich_repr__(self):
        yield "option", self.option.long
        yield "input", self.input
        yield "value", self.value


@functools.cache
def _ordinal(number):
    """
    Return a human-friendly ordinal label for a 1-based position.

    - 1..10 are rendered as words ("first"…"tenth").
    - Other numbers use numeric ordinals with correct English suffixes.
    """
    try:
        return {
            1: "first",
            2: "second",
            3: "third",
            4: "fourth",
            5: "fifth",
            6: "sixth",
            7: "seventh",
            8: "eighth",
            9: "ninth",
            10: "tenth",
        }[number]
    except KeyError:
        pass

    # 11th, 12th, 13th (and 111th, 112th, 113th, …)
    if 10 < number % 100 < 20:
        return f"{number}th"

    return f'{number}%s' % {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


def _resolve_token(shorts, longs, token):
    """
    normalize a raw token into (name, spec) or (name, None).

    shape
    - "--name" → long names first, short names as fallback.
    - "-name"  → short names first, long names as fallback.
    - anything else → (token, None), i.e. not an option.
    """
    if token.startswith("--"):
        name = token[2:]
        primary, secondary = longs, shorts
    elif token.startswith("-"):
        name = token[1:]
        primary, secondary = shorts, longs
    else:
        return token, None
    if not name:
        return name, None
    return name, primary.get(name) or secondary.get(name)


def parse(options, tokens, /, *, stacklevel=1, **context):
    """
    match tokens against options and return the ParseResult.

    parameters
    - options: Iterable[OptionSpec]
      the finalized registry (names are assumed unique per kind).
    - tokens: Iterable[str]
      the argument list WITHOUT the program name.
    - stacklevel: frames above the caller of parse() that repeated-option
      warnings are attributed to (1 points at the caller itself).
    - context: extra fault options (e.g. prog, colorful) merged into every
      fault raised or warned from here.

    returns
    - tuple[MatchedValue, ...] in the order options were encountered.

    raises
    - MissingValueError / InvalidValueError, see module docs. positions in
      messages are 1-based and count the program name as position zero.
    """
    options = tuple(options)
    shorts = {option.short: option for option in options}
    longs = {option.long: option for option in options}

    tokens = deque(tokens)
    result = []
    seen = set()
    index = 0

    while tokens:
        token = tokens.popleft()
        index += 1
        input, option = _resolve_token(shorts, longs, token)

        if option is None:
            continue

        if option in seen:
            warnings.warn(RepeatedOptionWarning(
                "option %r at %s position was already given, the last value wins" % (input, _ordinal(index)),
                title="repeated option",
                code=FaultCode.REPEATED_OPTION,
                hint="pass %r only once" % token,
                name=input,
                option=option,
                index=index,
                **context
            ), stacklevel=stacklevel + 1)
        seen.add(option)

        if not option.type.bearing:
            result.append(MatchedValue(option, input, None))
            continue

        if not tokens:
            raise MissingValueError(
                "option %r at %s position requires a value" % (input, _ordinal(index)),
                title="missing option value",
                code=FaultCode.MISSING_VALUE,
                hint="provide a value after the option (for example: %s %s)" % (token, option.type.label),
                name=input,
                option=option,
                index=index,
                **context
            )

        value = tokens.popleft()
        index += 1

        try:
            result.append(MatchedValue(option, input, option.type.convert(value)))
        except ValueError as error:
            raise InvalidValueError(
                "%s at %s position for option %r" % (error, _ordinal(index), input),
                title="invalid option value",
                code=FaultCode.INVALID_VALUE,
                hint="%r expects a %s (for example: %s %s)" % (
                    input, option.type.value, token, "5" if option.type is ValueType.NUMBER else "2.5"
                ),
                name=input,
                option=option,
                token=value,
                index=index,
                **context
            ) from None

    return tuple(result)


__all__ = (
    "MatchedValue",
    "parse",
)
