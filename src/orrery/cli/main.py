"""CLI entry point: orrery [-a | -u] LATITUDE LONGITUDE [ALTITUDE]."""

from __future__ import annotations

import argparse
import locale
import logging
import re
import sys
from typing import NoReturn

from orrery import __version__
from orrery.app import run_orrery
from orrery.config import get_log_file, get_log_level, get_time_zone_name
from orrery.params import (
    DisplayConfig,
    codeset_is_unicode,
    parse_location,
    resolve_time_zone,
)
from orrery.rendering.curses_sink import CursesTerminal
from orrery.spice.provider import SpiceSky
from orrery.view_state import ViewState

logger = logging.getLogger(__name__)

EXIT_USAGE = 1

# argparse only takes plain numbers such as -15.75 as negative positionals
_NEGATIVE_ANGLE = re.compile(r'^-[\d.]')


class _UsageParser(argparse.ArgumentParser):
    """Argument parser that reports errors as usage and version on stdout."""

    def error(self, message: str) -> NoReturn:
        logger.debug('Argument error: %s', message)
        _print_usage(self)
        sys.exit(EXIT_USAGE)


def _print_usage(parser: argparse.ArgumentParser) -> None:
    parser.print_usage(sys.stdout)
    print(f'{parser.prog} version {__version__}', file=sys.stdout)


def _build_parser() -> argparse.ArgumentParser:
    parser = _UsageParser(
        prog='orrery',
        description='Show the Sun, Moon and planets on a terminal sky chart.',
        epilog=(
            'Angles are decimal degrees, DD:MM:SS, or DD MM SS, optionally with a '
            'hemisphere letter (N/S/E/W) in place of the sign. Altitude is in '
            "metres unless suffixed with m, ft, yd, in, or given as 5'6\"."
        ),
    )
    glyphs = parser.add_mutually_exclusive_group()
    glyphs.add_argument(
        '-a',
        '--ascii',
        action='store_true',
        help='draw bodies with ASCII letters',
    )
    glyphs.add_argument(
        '-u',
        '--unicode',
        action='store_true',
        help='draw bodies with Unicode planetary symbols',
    )
    parser.add_argument(
        '-v',
        '--verbose',
        action='store_true',
        help='log at DEBUG level',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('latitude', help='observer latitude')
    parser.add_argument('longitude', help='observer longitude (east positive)')
    parser.add_argument('altitude', nargs='?', default=None, help='observer altitude')
    return parser


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI (level from --verbose or ORRERY_LOG).

    Records go to ORRERY_LOG_FILE when set; while curses owns the screen,
    stderr output would land on top of the chart.
    """
    level = logging.DEBUG if verbose else getattr(logging, get_log_level())
    log_file = get_log_file()
    if log_file is not None:
        logging.basicConfig(
            level=level,
            format='%(asctime)s %(levelname)s: %(name)s: %(message)s',
            filename=log_file,
        )
    else:
        logging.basicConfig(
            level=level,
            format='%(levelname)s: %(name)s: %(message)s',
            stream=sys.stderr,
        )


def _separate_negative_angles(argv: list[str]) -> list[str]:
    """Insert '--' before the first negative angle so it parses as a positional.

    ``-15:45:00`` and ``-15°45'00"`` would otherwise be read as options.
    Options must therefore come before the location.
    """
    for index, arg in enumerate(argv):
        if arg == '--':
            break
        if _NEGATIVE_ANGLE.match(arg):
            return [*argv[:index], '--', *argv[index:]]
    return list(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the orrery CLI.

    Parameters:
        argv: Arguments without the program name (default: sys.argv[1:]).

    Returns:
        Exit code: 0 on quit, 1 on an argument or kernel loading error.
    """
    parser = _build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(_separate_negative_angles(argv))
    _configure_logging(args.verbose)

    try:
        observer = parse_location(args.latitude, args.longitude, args.altitude)
    except ValueError as exc:
        logger.debug('Invalid location: %s', exc)
        _print_usage(parser)
        return EXIT_USAGE
    logger.info(
        'Observer at %.4f, %.4f, %.0f m',
        observer.latitude_deg,
        observer.longitude_deg,
        observer.altitude_m,
    )

    try:
        sky = SpiceSky()
    except RuntimeError as exc:
        print(f'Error: {exc}', file=sys.stderr)
        return 1
    try:
        time_zone = resolve_time_zone(get_time_zone_name())
    except ValueError as exc:
        print(f'Error: {exc}', file=sys.stderr)
        return 1

    # curses and the codeset check both need the user's locale.
    locale.setlocale(locale.LC_ALL, '')
    with CursesTerminal() as terminal:
        if args.ascii:
            unicode = False
        elif args.unicode:
            unicode = True
        else:
            unicode = codeset_is_unicode() and terminal.wide_aware()
        logger.info('Glyphs: %s', 'unicode' if unicode else 'ascii')
        state = ViewState(
            observer=observer,
            display=DisplayConfig(unicode=unicode, time_zone=time_zone),
        )
        try:
            return run_orrery(state, sky, terminal)
        except KeyboardInterrupt:
            logger.info('Interrupted')
            return 0


def console_main() -> NoReturn:
    """Entry point for console_scripts; calls main() and exits with its return code."""
    sys.exit(main())


if __name__ == '__main__':
    sys.exit(main())
