# src/paice_husk/cli.py
import argparse
import logging
import sys
from dataclasses import replace


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paice-husk",
        description="Stem every word of a word list with the Paice/Husk algorithm.",
    )
    parser.add_argument(
        "wordfile",
        nargs="?",
        help="Word list to stem (default: standard input)",
    )
    parser.add_argument(
        "--rules",
        dest="rules",
        help="Rule file in Paice/Husk grammar (default: settings, else bundled rules)",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help=(
            "Print '<stem> (<applied rules>)' for each word to stderr; words are "
            "stemmed one at a time without the stem cache (not combinable with --workers > 1)"
        ),
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Stemming threads (default from settings)",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=None,
        dest="max_length",
        help="Longest word handled (default from settings)",
    )
    parser.add_argument(
        "--reject-long",
        action="store_true",
        dest="reject_long",
        help="Fail on over-long words instead of truncating them",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def main(argv=None) -> int:
    """CLI: compile the rules, then print one stem per input word to stdout."""
    from .stemming.engine.core import LengthError, format_trace
    from .stemming.general.token.normalize import WordSourceError, iter_file_words, iter_words
    from .stemming.general.utils.load_config import (
        ConfigFileNotFound,
        ConfigParseError,
        ConfigTypeError,
        DataDirNotFound,
        StemmerSettings,
        load_settings,
    )
    from .stemming.orchestrator import Stemmer
    from .stemming.rules.compiler import GrammarError, RuleSourceError

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.trace and args.workers is not None and args.workers > 1:
        parser.error("--trace stems words sequentially; drop --workers or set it to 1")
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        try:
            settings = load_settings()
        except (DataDirNotFound, ConfigFileNotFound):
            settings = StemmerSettings()
        if args.rules:
            settings = replace(settings, rules_file=args.rules)
        if args.max_length is not None:
            settings = replace(settings, max_length=args.max_length)
        if args.reject_long:
            settings = replace(settings, overflow="reject")
        stemmer = Stemmer(settings=settings)

        words = iter_file_words(args.wordfile) if args.wordfile else (
            w for line in sys.stdin for w in iter_words(line)
        )
        if args.trace:
            for word in words:
                result = stemmer.stem_with_trace(word)
                print(result.stem)
                print(f"{result.stem} ({format_trace(result.trace)})", file=sys.stderr)
        else:
            for s in stemmer.stem_many(list(words), workers=args.workers):
                print(s)
    except (GrammarError, RuleSourceError, WordSourceError, LengthError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (ConfigParseError, ConfigTypeError) as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
