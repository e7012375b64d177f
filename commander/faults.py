"""
Commander faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing issue
  (errors and warnings), grouped by domain so logs and searches stay predictable.
- CommanderException / CommanderWarning: base types that carry a message plus
  a read-only options mapping and know how to render themselves with rich.

UX goals
- Position-first messages: parse faults name the ordinal position of the
  offending token (“at second position”).
- Short titles, one-sentence bodies, a single clear hint.

Integration
- Registration faults are raised by Commander.add_option.
- Parse faults are raised by parse() (and therefore by Commander.init).
- Warnings are emitted through warnings.warn and never stop parsing.
- The library never prints; a caller can do Console(stderr=True).print(fault).
"""
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.text import Text

from .utils import Unset


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - registration (1010x)
      • DUPLICATE_OPTION, INVALID_REGISTRY_STATE
    - parsing (1020x)
      • MISSING_VALUE, INVALID_VALUE
    - warnings (1210x)
      • REPEATED_OPTION

    normalize() allows host remapping to custom labels while keeping code-stability.
    """
    # --- registration errors (101xx) ---
    DUPLICATE_OPTION            = 10101
    INVALID_REGISTRY_STATE      = 10102

    # --- parsing errors (102xx) ---
    MISSING_VALUE               = 10201
    INVALID_VALUE               = 10202

    # --- warnings (121xx) ---
    REPEATED_OPTION             = 12101

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _render(fault, palette):
    """
    shared rich rendering for exceptions and warnings.

    layout
    - header: "[ prog — code | title ]" (prog only when known)
    - body: the message
    - hint: an arrow followed by the hint, when one is present
    """
    main = __import__("__main__")
    styles = defaultdict(str, palette | getattr(main, "__styles__", {}))
    colorful = fault.options.get("colorful", True)

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if not colorful:
            return Text(str(fragment))
        return Text(str(fragment), styles[style])

    header = Text("[ ")
    if prog := getattr(main, "__prog__", fault.options.get("prog")):
        header.append_text(text(prog, "prog-name")).append(" — ")
    if (code := fault.options.get("code")) is not None:
        header.append_text(text(code.normalize(), "code")).append(" | ")
    header.append_text(text(fault.options.get("title", "fault").title(), "title")).append(" ]")

    renders = [header, text(fault.message, "message")]
    if hint := fault.options.get("hint"):
        renders.append(Text.assemble(text(" → ", "hint-arrow"), text(hint, "hint")))
    return Group(*renders)


class CommanderException(Exception):
    """
    base of every error raised by the library.

    attributes
    - message: one-sentence, lowercased description.
    - options: read-only mapping of context (title, code, hint, name, option,
      token, index, prog, colorful).
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return "" if self.message is Unset else self.message

    def __rich__(self):
        return _render(self, {
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "title": "bold #FF4DA6",  # friendly pinky title
            "message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        })


class DuplicateOptionError(CommanderException): ...
class InvalidRegistryStateError(CommanderException): ...
class MissingValueError(CommanderException): ...
class InvalidValueError(CommanderException): ...


class CommanderWarning(Warning):
    """
    base of every warning emitted by the library (same contract as CommanderException).
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return "" if self.message is Unset else self.message

    def __rich__(self):
        return _render(self, {
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #FFB400",  # amber fault code for warnings
            "title": "bold #FFC2E0",  # softer pinky title for warnings
            "message": "#D6D6DE",  # slightly lighter gray body
            "hint-arrow": "#B8EFAF dim",  # softer green arrow
            "hint": "italic #B8EFAF",  # softer green hint text
        })


class RepeatedOptionWarning(CommanderWarning): ...


__all__ = (
    "FaultCode",
    "CommanderException",
    "DuplicateOptionError",
    "InvalidRegistryStateError",
    "MissingValueError",
    "InvalidValueError",
    "CommanderWarning",
    "RepeatedOptionWarning",
)
