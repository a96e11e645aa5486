"""CLI entry point for the screen resolution switcher."""

import argparse
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from screenres.check_required_bins import BinaryChecker
from screenres.logging import Logger, set_global_level
from .config import DisplayConfig
from .errors import DegenerateRequest, DisplayError, DisplayNotFound
from .factory import CollaboratorFactory
from .manager import DisplayManager
from .models import ModeCatalog
from .resolver import parse_int, resolve

logger = Logger(__name__)

THEME = Theme(
    {
        "current": "bold green",
        "mode": "white",
        "label": "cyan",
        "unknown": "dim",
        "ok": "green",
    }
)

BARE_COMMANDS = {
    "list": "--list",
    "mode": "--mode",
    "set": "--set",
    "retina": "--set-retina",
}

EPILOG = '''
Examples:
  %(prog)s -l            list displays
  %(prog)s -m 0          list all modes of display 0
  %(prog)s -m            shorthand for -m 0
  %(prog)s -s 0 800 1    set display 0 to the first mode 800 wide at 1x
  %(prog)s -s 0 800 600  set display 0 to the first mode 800 x 600, any scale
  %(prog)s -s 0 800      set display 0 to the first listed mode 800 wide
  %(prog)s -s 800        shorthand for -s 0 800
  %(prog)s -r 0 800      same as -s 0 800
  %(prog)s -d            toggle dark mode

A first value above {max_displays} is taken as a width on display 0. A third
value above {max_scale} is a height, otherwise a scale factor; a fourth value
fills in the other one. Height and scale left out match any value, and the
first matching mode in the order shown by -m wins.
'''


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="screenres",
        description="Switch display resolution from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG.format(max_displays=DisplayConfig.MAX_DISPLAYS, max_scale=DisplayConfig.MAX_SCALE),
    )
    actions = parser.add_mutually_exclusive_group()
    actions.add_argument('-l', '--list', action='store_true', help="list displays")
    actions.add_argument('-m', '--mode', nargs='?', const='0', metavar='INDEX',
                         help="list all modes of a display (default 0)")
    actions.add_argument('-s', '--set', nargs='*', metavar='ARG',
                         help="set mode: [INDEX] WIDTH [HEIGHT] [SCALE]")
    actions.add_argument('-r', '--set-retina', nargs='*', metavar='ARG',
                         help="same as --set")
    actions.add_argument('-d', '--toggle-dark-mode', action='store_true', help="toggle dark mode")
    parser.add_argument('-v', '--verbose', action='store_true', help="show debug logging")
    return parser


def normalize_argv(argv: List[str]) -> List[str]:
    if argv and argv[0] in BARE_COMMANDS:
        return [BARE_COMMANDS[argv[0]]] + argv[1:]
    return argv


def make_console() -> Console:
    return Console(theme=THEME, highlight=False, soft_wrap=True)


def render_displays(console: Console, catalogs: List[ModeCatalog]) -> None:
    for i, catalog in enumerate(catalogs):
        mode = catalog.current_mode
        line = escape(mode.format()) if mode else "[unknown]current mode unknown[/unknown]"
        console.print(f"[label]Display {i}:[/label] [mode]{line}[/mode]  [unknown]({escape(catalog.display_id)})[/unknown]")


def render_modes(console: Console, display_index: int, catalog: ModeCatalog) -> None:
    console.print(f"Supported Modes for Display {display_index}:")
    for i, mode in enumerate(catalog.modes):
        if i == catalog.current_index:
            console.print(f"[current]{escape(mode.format(DisplayConfig.CURRENT_MODE_MARKER))}[/current]")
        else:
            console.print(f"[mode]{escape(mode.format(DisplayConfig.OTHER_MODE_MARKER))}[/mode]")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args, unknown = parser.parse_known_args(normalize_argv(list(sys.argv[1:] if argv is None else argv)))
    if unknown:
        parser.print_help()
        return 2

    set_global_level("DEBUG" if args.verbose else DisplayConfig.LOG_LEVEL)

    set_tokens = args.set if args.set is not None else args.set_retina
    if not (args.list or args.mode is not None or set_tokens is not None or args.toggle_dark_mode):
        parser.print_help()
        return 0

    if set_tokens is not None and resolve(set_tokens).is_degenerate:
        logger.error(str(DegenerateRequest()))
        parser.print_usage()
        return 1

    try:
        collaborators = CollaboratorFactory.get()
    except ValueError as e:
        logger.error(str(e))
        return 1

    bins = collaborators.appearance_bins if args.toggle_dark_mode else collaborators.display_bins
    if not BinaryChecker(bins).check_all():
        return 3

    console = make_console()
    manager = DisplayManager(collaborators.enumerator, collaborators.configurator)

    try:
        if args.list:
            render_displays(console, manager.display_catalogs())

        elif args.mode is not None:
            display_index = parse_int(args.mode) or 0
            render_modes(console, display_index, manager.catalog(display_index))

        elif set_tokens is not None:
            if manager.set_mode(set_tokens):
                console.print("[ok]Display mode set[/ok]")

        elif args.toggle_dark_mode:
            console.print(f"Dark Mode: {escape(collaborators.appearance.toggle())}")

    except DegenerateRequest as e:
        logger.error(str(e))
        parser.print_usage()
        return 1
    except DisplayNotFound as e:
        logger.error(f"{e}. List all available displays by: {parser.prog} -l")
        return 1
    except DisplayError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
