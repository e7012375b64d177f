from rich.console import Console
from rich.pretty import pprint

from commander import *

console = Console()
stderr = Console(stderr=True)


if __name__ == '__main__':
    cmd = (
        Commander()
        .add_option("v", "version", "Show the version of this application")
        .add_option("h", "help", "Show this help")
        .add_option("if", "input", "File to use as input", ValueType.STRING)
        .add_option("c", "count", "Amount of times to do something", ValueType.NUMBER)
        .add_option("b", "balance", "Amount of money in your bank account", ValueType.FLOAT)
    )

    try:
        cmd.init()
    except CommanderException as error:
        stderr.print(error)
        raise SystemExit(1)

    if cmd.arg_count() == 1 or cmd.has_option("help"):
        console.print(cmd)
    else:
        for argument in cmd.arguments():
            pprint(argument)
