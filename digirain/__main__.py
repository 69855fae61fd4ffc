"""
Entry point for digirain.
"""
import argparse
import curses
import locale
import logging
import os
import traceback

from .core.app import DigitalRain
from .core.config import ConfigError, apply_overrides, load_config, save_config
from .core.glyphs import SYMBOL_SETS
from .theme import list_themes

# Ensure UTF-8
try:
    locale.setlocale(locale.LC_ALL, '')
except locale.Error:
    pass


def configure_logging(environ=None):
    """Enable debug logging when DIGIRAIN_DEBUG is set.

    Records go to the file named by DIGIRAIN_LOG when given, since stderr
    shares the screen with curses.
    """
    environ = os.environ if environ is None else environ
    if not environ.get('DIGIRAIN_DEBUG'):
        return False
    logging.basicConfig(
        level=logging.DEBUG,
        format='[%(levelname)s] %(name)s: %(message)s',
        filename=environ.get('DIGIRAIN_LOG') or None,
    )
    return True


def build_parser():
    parser = argparse.ArgumentParser(prog='digirain', description='Digital rain screensaver for the terminal.')
    parser.add_argument('--config', help='Path to config.toml (default: ~/.config/digirain/config.toml).')
    parser.add_argument('--columns', type=int, help='Number of rain columns.')
    parser.add_argument('--max-characters', type=int, help='Maximum number of live glyphs.')
    parser.add_argument('--fps', type=int, dest='frame_rate', help='Frames per second.')
    parser.add_argument('--symbols', choices=sorted(SYMBOL_SETS), help='Glyph symbol set.')
    parser.add_argument('--theme', choices=[theme.key for theme in list_themes()], help='Color theme.')
    parser.add_argument('--seed', type=int, help='Random seed for reproducible rain.')
    parser.add_argument(
        '--write-config',
        action='store_true',
        help='Write the effective configuration to the config path and exit.',
    )
    return parser


def resolve_config(args, parser):
    """Load the config file and apply command line overrides."""
    config = load_config(args.config)
    try:
        return apply_overrides(
            config,
            columns=args.columns,
            max_characters=args.max_characters,
            frame_rate=args.frame_rate,
            symbols=args.symbols,
            theme=args.theme,
            seed=args.seed,
        )
    except ConfigError as exc:
        parser.error(str(exc))


def run(config):
    """Run digirain and return process exit code."""
    try:
        curses.wrapper(lambda stdscr: DigitalRain(stdscr, config).run())
        return 0
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        try:
            curses.endwin()
        except curses.error:
            pass
        print(f'\nError: {e}')
        traceback.print_exc()
        return 1


def main_cli(argv=None):
    """Console script entrypoint."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    config = resolve_config(args, parser)
    if args.write_config:
        path = save_config(config, args.config)
        print(f'Wrote {path}')
        return 0
    return run(config)


if __name__ == '__main__':
    raise SystemExit(main_cli())
