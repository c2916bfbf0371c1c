#!/usr/bin/env python3
"""
conlang CLI
===========
Command-line interface for language and name generation.

Usage:
    conlang describe --seed NotEnglish
    conlang words -n 10 --seed NotEnglish
    conlang places -n 10 --seed NotEnglish --stream-seed run1
    conlang people -n 5 --json
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich import box

from conlang import __version__
from conlang.generators import (
    CatalogError,
    Language,
    RandomSource,
    SeededRandom,
    get_rng,
)
from conlang.settings import get_setting

logger = logging.getLogger(__name__)

NAME_KINDS = {
    'places': 'make_place_rng',
    'regions': 'make_region_rng',
    'people': 'make_person_rng',
}


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = Console(highlight=False)

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def json(self, data):
        """JSON goes out even in quiet mode."""
        print(json.dumps(data, ensure_ascii=False, indent=2))

    def table(self, headers: list, rows: list, title: str = None):
        """Print a formatted table."""
        if self.quiet:
            return
        table = Table(title=title, box=box.SIMPLE)
        for header in headers:
            table.add_column(str(header))
        for row in rows:
            table.add_row(*(str(c) for c in row))
        self.console.print(table)


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else get_setting("logging.level", "WARNING")
    logging.basicConfig(level=level, format=get_setting("logging.format"))


def get_language(args) -> Language:
    if args.seed is not None:
        return Language.from_seed(args.seed)
    return Language.from_random(get_rng())


def get_stream(args) -> RandomSource:
    if args.stream_seed is not None:
        return SeededRandom.from_string(args.stream_seed)
    return get_rng()


# =============================================================================
# Commands
# =============================================================================

def cmd_describe(args, out: Output):
    """Show a language's phonology and vocabulary."""
    summary = get_language(args).describe()

    if args.json:
        out.json(summary)
        return 0

    phonemes = summary['phonemes']
    rows = [[cls, symbols] for cls, symbols in phonemes.items()]
    rows.append(['template', summary['template']])
    rows.append(['syllables', '{}-{}'.format(*summary['syllables'])])
    rows.append(['genitive', summary['genitive']])
    rows.append(['definite', summary['definite']])
    rows.append(['titles', ', '.join(summary['titles'])])
    rows.append(['surname last', 'yes' if summary['surname_last'] else 'no'])
    for category, morphemes in summary['morphemes'].items():
        rows.append([f'{category} morphemes', ', '.join(morphemes)])
    out.table(['Property', 'Value'], rows, title='Language')

    spelling = [[symbol, spelled] for symbol, spelled in sorted(summary['orthography'].items())]
    out.table(['Symbol', 'Spelling'], spelling, title='Orthography')
    return 0


def cmd_words(args, out: Output):
    """Generate plain words."""
    lang = get_language(args)
    rng = get_stream(args)
    words = [lang.make_word_rng(rng) for _ in range(args.count)]

    if args.json:
        out.json(words)
        return 0

    out.table(['#', 'Word'], [[i, w] for i, w in enumerate(words, 1)])
    return 0


def cmd_names(args, out: Output):
    """Generate place, region or person names."""
    lang = get_language(args)
    rng = get_stream(args)
    make = getattr(lang, NAME_KINDS[args.command])
    names = [make(rng) for _ in range(args.count)]

    if args.json:
        out.json([{'long': long_form, 'short': short_form} for long_form, short_form in names])
        return 0

    rows = [[i, long_form, short_form] for i, (long_form, short_form) in enumerate(names, 1)]
    out.table(['#', 'Name', 'Short'], rows)
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    default_count = int(get_setting("cli.default_count", 10))

    parser = argparse.ArgumentParser(
        prog='conlang',
        description='conlang - Fictional Language & Name Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s describe --seed NotEnglish
  %(prog)s words -n 10 --seed NotEnglish
  %(prog)s places -n 10 --seed NotEnglish --stream-seed run1
  %(prog)s people -n 5 --json
"""
    )
    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    def add_language_args(p):
        p.add_argument('--seed', help='Seed string for the language (default: random)')
        p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- describe ---
    p = subparsers.add_parser('describe', aliases=['desc'], help='Describe a language')
    add_language_args(p)

    # --- words / names ---
    for command, help_text in (('words', 'Generate plain words'),
                               ('places', 'Generate place names'),
                               ('regions', 'Generate region names'),
                               ('people', 'Generate person names')):
        p = subparsers.add_parser(command, help=help_text)
        add_language_args(p)
        p.add_argument('-n', '--count', type=int, default=default_count,
                       help=f'Number of items (default: {default_count})')
        p.add_argument('--stream-seed', help='Seed string for the generation stream (default: random)')

    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(args.verbose)

    cmd_map = {'desc': 'describe'}
    command = cmd_map.get(args.command, args.command)
    out = Output(quiet=args.quiet)

    if getattr(args, 'count', 0) < 0:
        out.error("--count must not be negative")
        return 2

    commands = {
        'describe': cmd_describe,
        'words': cmd_words,
        'places': cmd_names,
        'regions': cmd_names,
        'people': cmd_names,
    }

    try:
        return commands[command](args, out)
    except KeyboardInterrupt:
        out.print("\nCancelled.")
        return 130
    except CatalogError as e:
        logger.debug("Catalog error", exc_info=True)
        out.error(str(e))
        return 1


if __name__ == '__main__':
    sys.exit(main())
