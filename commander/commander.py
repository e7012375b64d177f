"""
Commander: declare options, parse the command line, read typed values back.

What this module provides
- Commander: a builder that accumulates OptionSpec entries (add_option, chainable),
  is finalized by init() (which parses the process arguments), and then serves:
  • arg_count(): number of raw tokens, program name included.
  • arguments(): matched options in command-line order.
  • get_string_option / get_number_option / get_float_option: typed getters.
  • has_option: presence check (mostly for NO_VALUE options).
  • help(): plain-text listing of every registered option.

Quick start
    from commander import Commander, ValueType

    cmd = (
        Commander()
        .add_option("v", "version", "Show the version of this application")
        .add_option("if", "input", "File to use as input", ValueType.STRING)
        .add_option("c", "count", "Amount of times to do something", ValueType.NUMBER)
        .init()
    )

    if cmd.arg_count() == 1:
        print(cmd.help())

Lifecycle
- building: add_option may be called any number of times.
- finalized: after init(), add_option raises InvalidRegistryStateError.
  init() may be called again with another argument vector; the previous
  ParseResult is replaced as a whole, or kept when the new parse fails.

Lookups
- getters accept either the short or the long name (without dashes); the
  short names are checked first.
- unknown names, options that were not supplied, a kind mismatch, or a query
  before init() all yield None (has_option yields False).
"""
import os.path
import sys

from .faults import *
from .help import render
from .options import OptionSpec, ValueType
from .parser import parse
from .utils import *


class Commander:
    """
    Option registry, parser front-end, and typed result store.

    Attributes
    - options: tuple[OptionSpec, ...] in registration order (read-only).
    - finalized: True once init() has been called.
    - colorful: whether __rich__ and faults carry styles.
    """

    options = mirror("options")

    def __init__(self, *, colorful=True):
        if not isinstance(colorful, bool):
            raise TypeError("commander 'colorful' must be a boolean")
        self.colorful = colorful
        self._options = []
        self._result = ()
        self._argv = ()

    @property
    def finalized(self):
        return isinstance(self._options, tuple)

    @property
    def executable(self):
        """program name (argv[0]) of the last parse, None when unknown."""
        return self._argv[0] if self._argv else None

    def _context(self):
        return {
            "prog": os.path.basename(self.executable) if self.executable else None,
            "colorful": self.colorful,
        }

    def add_option(self, short, long, descr="", type=ValueType.NO_VALUE):
        """
        Register a new option and return self for chaining.

        raises
        - InvalidRegistryStateError: the registry was already finalized by init().
        - DuplicateOptionError: short or long name is already registered.
        - TypeError / ValueError: malformed names, descr or type (see OptionSpec).
        """
        if self.finalized:
            raise InvalidRegistryStateError(
                "cannot add option %r after init()" % long,
                title="registry is finalized",
                code=FaultCode.INVALID_REGISTRY_STATE,
                hint="register every option before calling init()",
                **self._context()
            )

        option = OptionSpec(short, long, descr, type)

        for other in self._options:
            if other.short == option.short:
                kind, name = "short", option.short
            elif other.long == option.long:
                kind, name = "long", option.long
            else:
                continue
            raise DuplicateOptionError(
                "%s name %r is already used by option %r" % (kind, name, other.long),
                title="duplicate option",
                code=FaultCode.DUPLICATE_OPTION,
                hint="pick another %s name for option %r" % (kind, option.long),
                name=name,
                option=other,
                **self._context()
            )

        self._options.append(option)
        return self

    def init(self, argv=Unset, /):
        """
        Finalize the registry and parse the command line.

        parameters
        - argv: Sequence[str], the full argument vector with the program name at
          index 0. Defaults to sys.argv.

        returns
        - self, so construction can end a chain.

        raises
        - MissingValueError / InvalidValueError from parse(); the registry is
          still finalized and the previous results stay in place.
        """
        argv = tuple(coalesce(argv, sys.argv))
        if not all(isinstance(token, str) for token in argv):
            raise TypeError("commander init() argument must be a sequence of strings")

        self._options = tuple(self._options)

        prog = {"prog": os.path.basename(argv[0]) if argv else None, "colorful": self.colorful}
        result = parse(self._options, argv[1:], stacklevel=2, **prog)

        # swap both together so readers never see a half-updated state
        self._result, self._argv = result, argv
        return self

    def option_count(self):
        """Number of registered options."""
        return len(self._options)

    def arg_count(self):
        """Number of raw tokens in the parsed argv, program name included."""
        return len(self._argv)

    def arguments(self):
        """
        Yield the matched options (MatchedValue) in command-line order.

        Each call iterates an independent snapshot of the result current at call time.
        """
        return (match for match in self._result)

    def _lookup(self, name):
        """last MatchedValue for the option named name, None when absent."""
        option = next((option for option in self._options if option.short == name), None)
        if option is None:
            option = next((option for option in self._options if option.matches(name)), None)
        if option is None:
            return None
        for match in reversed(self._result):
            if match.option is option:
                return match
        return None

    def _get(self, name, type):
        match = self._lookup(name)
        if match is None or match.option.type is not type:
            return None
        return match.value

    def get_string_option(self, name):
        return self._get(name, ValueType.STRING)

    def get_number_option(self, name):
        return self._get(name, ValueType.NUMBER)

    def get_float_option(self, name):
        return self._get(name, ValueType.FLOAT)

    def has_option(self, name):
        """True when the option named name was found on the command line."""
        return self._lookup(name) is not None

    def help(self):
        """Plain-text listing of every registered option, in registration order."""
        return render(self._options).plain

    def __rich__(self):
        return render(self._options, colorful=self.colorful)

    def __repr__(self):
        return "commander(options=%r, arguments=%r)" % (self.options, self._result)


__all__ = (
    "Commander",
)
