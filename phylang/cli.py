#!/usr/bin/env python3
"""
Phylang CLI
===========
Command-line interface for generated languages.

Usage:
    phylang word house river --preset coastal_folk
    phylang phrase "the warrior sees the mountain" --traits 2 3 4 3 3 2 --geography mountains
    phylang name person 42 --preset desert_nobility
    phylang name place 7 --type natural --geography forest
    phylang genome --preset mountain_warriors --json
    phylang presets
"""

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from phylang import __version__
from phylang.config import default_preset, default_seed, get_preset, list_presets
from phylang.culture import CulturalProfile, Geography
from phylang.language import new_language
from phylang.naming import (
    Characteristic,
    EpithetContext,
    PersonalNameContext,
    PlaceNameContext,
    PlaceType,
)
from phylang.settings import get_setting

logger = logging.getLogger(__name__)


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = Console(highlight=False, soft_wrap=True, emoji=False)
        self.err_console = Console(stderr=True, highlight=False, soft_wrap=True, emoji=False)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, markup=False, **kwargs)

    def result(self, text: str):
        """Essential output; printed even in quiet mode."""
        self.console.print(text, markup=False)

    def error(self, msg: str):
        self.err_console.print(f"Error: {msg}", markup=False)

    def table(self, headers: list, rows: list, title: str = None):
        """Print a formatted table; quiet mode prints bare values instead."""
        if self.quiet:
            for row in rows:
                self.result(' '.join(str(c) for c in row))
            return

        table = Table(title=title)
        for header in headers:
            table.add_column(header)
        for row in rows:
            table.add_row(*(str(c) for c in row))
        self.console.print(table)

    def json(self, data):
        self.result(json.dumps(data, indent=2, ensure_ascii=False))


def configure_logging(verbose: bool = False):
    level_name = 'DEBUG' if verbose else str(get_setting('logging.level', 'WARNING')).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=get_setting('logging.format', '%(levelname)s %(name)s: %(message)s'),
    )


def build_language(args):
    """Language from --preset / --traits / --geography / --seed."""
    if args.traits:
        profile = CulturalProfile.from_sequence(args.traits)
        geography = None
    else:
        profile, geography = get_preset(args.preset or default_preset())

    if args.geography:
        geography = Geography.parse(args.geography)
    if geography is None:
        _, geography = get_preset(default_preset())

    seed = args.seed if args.seed is not None else default_seed()
    logger.debug("Culture %s, geography %s, seed %d", profile.as_tuple(), geography.value, seed)
    return new_language(profile, geography, seed, cache=not args.no_cache)


# =============================================================================
# Commands
# =============================================================================

def cmd_word(args, out: Output):
    """Translate concepts word by word."""
    lang = build_language(args)
    words = lang.translate_many(args.concepts)

    if args.json:
        out.json(words)
    else:
        out.table(['Concept', 'Word'], list(words.items()), title=lang.id)
    return 0


def cmd_phrase(args, out: Output):
    """Translate a phrase."""
    lang = build_language(args)
    translated = lang.translate_phrase(args.text)
    out.print(f"Word order: {lang.word_order.value}")
    out.result(translated)
    return 0


def cmd_name(args, out: Output):
    """Generate a personal name, place name, or epithet."""
    lang = build_language(args)
    naming = lang.naming

    if args.kind == 'person':
        context = PersonalNameContext(
            args.id,
            parent_name=args.parent,
            birth_order=args.birth_order,
            geography=args.origin,
        )
        if args.epithet:
            name = naming.generate_full_name(context, EpithetContext(args.id))
        else:
            name = naming.generate_personal_name(context)
        out.print(f"Pattern: {naming.pattern.value}")
    elif args.kind == 'place':
        context = PlaceNameContext(
            args.id,
            place_type=PlaceType.parse(args.type),
            geography=args.local_geography,
            founder_name=args.founder,
            historical_event=args.event,
        )
        name = naming.generate_place_name(context)
        out.print(f"Pattern: {naming.place_pattern(context).value}")
    else:
        context = EpithetContext(
            args.id,
            achievement=args.achievement,
            birth_event=args.birth_event,
            characteristic=args.characteristic,
        )
        name = naming.generate_epithet(context)
        out.print(f"Pattern: {naming.epithet_pattern(context).value}")

    out.result(name)
    return 0


def cmd_genome(args, out: Output):
    """Show the derived genome."""
    lang = build_language(args)
    summary = lang.describe()

    if args.json:
        out.json(summary)
        return 0

    rows = []
    for key, value in summary.items():
        if isinstance(value, dict):
            value = ', '.join(f"{k}={v}" for k, v in value.items())
        elif isinstance(value, list):
            value = ' '.join(str(v) for v in value)
        rows.append([key, value])
    out.table(['Property', 'Value'], rows, title=lang.id)
    return 0


def cmd_presets(args, out: Output):
    """List cultural presets."""
    rows = []
    for name, info in sorted(list_presets().items()):
        traits = ' '.join(f"{t:g}" for t in info['traits'])
        rows.append([name, info['geography'], traits, info['description']])
    out.table(['Preset', 'Geography', 'Traits (A O C E H Em)', 'Description'], rows,
              title='Cultural Presets')
    return 0


# =============================================================================
# Main
# =============================================================================

def _culture_parser() -> argparse.ArgumentParser:
    parent = argparse.ArgumentParser(add_help=False)
    group = parent.add_argument_group('culture')
    source = group.add_mutually_exclusive_group()
    source.add_argument('--preset', '-p', help='Cultural preset (see "presets")')
    source.add_argument('--traits', '-t', nargs=6, type=float, metavar='SCORE',
                        help='Six trait scores 1-5: A O C E H Em')
    group.add_argument('--geography', '-g', help='Geography (e.g. mountains, river_valley)')
    group.add_argument('--seed', '-s', type=int, help='Language seed')
    group.add_argument('--no-cache', action='store_true', help='Disable the word cache')
    return parent


def main(argv=None):
    culture = _culture_parser()

    parser = argparse.ArgumentParser(
        prog='phylang',
        description='Phylang - Culture-Driven Language Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s word house river fire --preset coastal_folk
  %(prog)s phrase "the warrior sees the mountain" --preset river_scholars
  %(prog)s name person 42 --preset desert_nobility --epithet
  %(prog)s name place 7 --type natural --geography forest
  %(prog)s genome --traits 4 3 2 3 3 4 --geography coastal --seed 12345
  %(prog)s presets
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging and tracebacks')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- word ---
    p = subparsers.add_parser('word', aliases=['w'], parents=[culture], help='Translate concepts')
    p.add_argument('concepts', nargs='+', help='Concept strings (used verbatim)')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- phrase ---
    p = subparsers.add_parser('phrase', parents=[culture], help='Translate a phrase')
    p.add_argument('text', help='Phrase to translate')

    # --- name ---
    p = subparsers.add_parser('name', aliases=['n'], help='Generate names')
    kinds = p.add_subparsers(dest='kind', required=True)

    k = kinds.add_parser('person', parents=[culture], help='Personal name')
    k.add_argument('id', help='Entity identifier')
    k.add_argument('--parent', help='Parent name for patronymics')
    k.add_argument('--birth-order', type=int, help='Birth order (1 = first)')
    k.add_argument('--origin', help='Geography override for lineage names')
    k.add_argument('--epithet', '-e', action='store_true', help='Append an epithet')

    k = kinds.add_parser('place', parents=[culture], help='Place name')
    k.add_argument('id', help='Place identifier')
    k.add_argument('--type', choices=[t.value for t in PlaceType], default='settlement',
                   help='Place type (default: settlement)')
    k.add_argument('--local-geography', help='Geography override for this place')
    k.add_argument('--founder', help='Founder name')
    k.add_argument('--event', help='Historical event concept')

    k = kinds.add_parser('epithet', parents=[culture], help='Epithet')
    k.add_argument('id', help='Entity identifier')
    k.add_argument('--achievement', help='Achievement concept')
    k.add_argument('--birth-event', help='Birth circumstance concept')
    k.add_argument('--characteristic', choices=[c.value for c in Characteristic],
                   help='Defining characteristic')

    # --- genome ---
    p = subparsers.add_parser('genome', parents=[culture], help='Show the derived genome')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- presets ---
    subparsers.add_parser('presets', help='List cultural presets')

    # Parse
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args.verbose)

    # Handle aliases
    cmd_map = {'w': 'word', 'n': 'name'}
    command = cmd_map.get(args.command, args.command)

    # Output handler
    out = Output(quiet=args.quiet)

    # Dispatch
    commands = {
        'word': cmd_word,
        'phrase': cmd_phrase,
        'name': cmd_name,
        'genome': cmd_genome,
        'presets': cmd_presets,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except Exception as e:
            out.error(str(e))
            if args.verbose:
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
