"""
Commander help rendering.

render(options, *, colorful=False) builds a rich Text listing every option in
registration order:

    options available:
      -v, --version          Show the version of this application
      -if, --input <string>  File to use as input

Names column is padded to the widest entry; presence-only options carry no
value marker. The renderer never consults parse results.

Palette keys (override any entry with a __styles__ mapping in __main__)
- heading-label, short-name, long-name, metavar, option-description
"""
from collections import defaultdict

from rich.text import Text


def render(options, /, *, colorful=False):
    """
    Build the help listing for the given specs.

    Parameters
    - options: Iterable[OptionSpec], in the order they should be listed.
    - colorful: apply the palette; when False the Text carries no styles.

    Returns
    - rich.text.Text (use .plain for a plain string).
    """
    styles = defaultdict(str, {
        "heading-label": "bold #FFFFFF",  # Pure white header
        "short-name": "bold #22C55E",  # GREEN for short names
        "long-name": "bold #00E6FF",  # CYAN for long names
        "metavar": "bold #FFD600",  # AMBER for value markers
        "option-description": "#9CA3AF",  # Muted gray
    } | getattr(__import__("__main__"), "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    padding = 2  # Leading spaces before the names column
    gutter = 2   # Spaces between the names column and the description

    rows = []
    for option in options:
        names = Text.assemble(
            ("-" + option.short, styler("short-name")),
            ", ",
            ("--" + option.long, styler("long-name")),
        )
        if label := option.type.label:
            names.append(" ").append(label, styler("metavar"))
        rows.append((names, option.descr))

    width = max((len(names) for names, _ in rows), default=0)

    output = Text()
    output.append("options available", styler("heading-label")).append(":")
    for names, descr in rows:
        output.append("\n").append(" " * padding).append_text(names)
        if descr:
            output.append(" " * (width - len(names) + gutter)).append(descr, styler("option-description"))
    return output


__all__ = (
    "render",
)
