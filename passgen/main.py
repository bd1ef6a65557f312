#!/usr/bin/env python3
"""
Passphrase Generator - Main Entry Point
Command line interface.

Usage:
    passgen
    passgen --bits 128 --number 5
    passgen --length 6 --separator -
    passgen --dictionary alphanumeric --bits 96
    passgen --file /usr/share/dict/words --verbose
    passgen --dice 6 --verbose
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .dice_advisor import CandidateDice
from .dictionary import BUILTIN_DICTIONARIES, Dictionary, list_builtin, load_builtin, load_file
from .entropy_source import create_entropy_source
from .exceptions import PassgenError
from .generator import PassphraseGenerator
from .logger import close_logging, get_logger, get_user_friendly_message, setup_logging
from .models import DEFAULT_BITS, DEFAULT_DICTIONARY, GeneratorConfig
from .report import build_report


logger = get_logger(__name__)


def create_argument_parser() -> argparse.ArgumentParser:
    """Build the argument parser"""
    parser = argparse.ArgumentParser(
        prog="passgen",
        description=(
            "Generate reasonably secure passwords. Uses the operating system "
            "cryptographic random number generator, or physical dice, to pick "
            "passwords without human bias."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s --bits 128 --number 5
  %(prog)s --length 6 --separator -
  %(prog)s --dictionary alphanumeric --bits 96
  %(prog)s --file /usr/share/dict/words --verbose
  %(prog)s --dice 6 --verbose
        """,
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show dictionary, entropy and attack time estimates on stderr",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log errors",
    )
    parser.add_argument(
        "-s", "--separator",
        default=None,
        help="Unit separator (default: the dictionary's own, a space for word lists)",
    )
    parser.add_argument(
        "-n", "-c", "--number",
        dest="count",
        type=int,
        default=1,
        metavar="COUNT",
        help="Number of passwords to generate (default: 1)",
    )
    parser.add_argument(
        "-b", "--bits",
        type=float,
        default=DEFAULT_BITS,
        help=f"Password strength target, 2^n (default: {DEFAULT_BITS:g})",
    )
    parser.add_argument(
        "-l", "--length",
        type=int,
        default=None,
        help="Password length in units (overrides --bits)",
    )
    parser.add_argument(
        "-f", "--file",
        default=None,
        metavar="PATH",
        help="External dictionary, line-separated",
    )
    parser.add_argument(
        "-d", "-w", "--dictionary",
        default=DEFAULT_DICTIONARY,
        choices=list(BUILTIN_DICTIONARIES),
        help=f"Built-in dictionary (default: {DEFAULT_DICTIONARY})",
    )
    parser.add_argument(
        "-D", "--list-dictionaries",
        action="store_true",
        help="Describe built-in dictionaries",
    )
    parser.add_argument(
        "--dice",
        type=int,
        default=None,
        metavar="SIDES",
        help="Use rolls of a physical die with SIDES sides (2-144) instead of the OS RNG",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        metavar="PATH",
        help="Also append log output to this file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def create_config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    """Map parsed arguments onto a GeneratorConfig"""
    if args.verbose:
        log_level = "DEBUG"
    elif args.quiet:
        log_level = "ERROR"
    else:
        log_level = "WARNING"

    return GeneratorConfig(
        bits=args.bits,
        length=args.length,
        dictionary=args.dictionary,
        file=args.file,
        separator=args.separator,
        count=args.count,
        dice_sides=args.dice,
        verbose=args.verbose,
        log_level=log_level,
        log_file=args.log_file,
    )


def list_dictionaries() -> None:
    for builtin in list_builtin():
        dictionary = builtin.load()
        print(f"{builtin.name}: {dictionary.size()} entries\n  {builtin.description}\n")


def load_dictionary(config: GeneratorConfig) -> Dictionary:
    if config.file:
        return load_file(config.file)
    return load_builtin(config.dictionary)


def run(config: GeneratorConfig, read_roll=None) -> List[str]:
    """Generate the passphrases described by `config`

    Nothing is returned unless every passphrase was generated.
    """
    config.validate()

    dictionary = load_dictionary(config)
    separator = config.separator if config.separator is not None else dictionary.separator
    target = config.target()
    source = create_entropy_source(config.dice_sides, read_roll)
    generator = PassphraseGenerator()

    result = generator.plan(dictionary, target)
    if config.verbose:
        for line in build_report(dictionary, result):
            print(line, file=sys.stderr)
        if config.dice_sides is not None:
            print("# Common dice for this dictionary:", file=sys.stderr)
            for candidate in CandidateDice.ordered_for_limit(dictionary.size())[:3]:
                print(f"#   {candidate.describe()}", file=sys.stderr)
            print("#", file=sys.stderr)

    return generator.generate(dictionary, target, source, config.count, separator)


def main(args: Optional[List[str]] = None) -> int:
    """Entry point

    Args:
        args: argument list, sys.argv when None

    Returns:
        exit code (0 success, 1 error, 130 interrupted)
    """
    parser = create_argument_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.list_dictionaries:
        list_dictionaries()
        return 0

    config = create_config_from_args(parsed_args)
    setup_logging(config.log_level, config.log_file)

    try:
        passphrases = run(config)
        for passphrase in passphrases:
            print(passphrase)
        return 0

    except PassgenError as e:
        logger.debug(f"{type(e).__name__}: {e}", exc_info=True)
        print(f"Error: {get_user_friendly_message(e)}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nAborted, no password generated.", file=sys.stderr)
        return 130

    finally:
        close_logging()


if __name__ == "__main__":
    sys.exit(main())
