import argparse
import logging
import sys

from spelint.config import settings
from spelint.engine import SpellChecker
from spelint.lexicon import LEXICON_MODES, load_lexicon

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spelint",
        description="Report unknown words in text and suggest corrections.",
    )
    parser.add_argument("text", nargs="+", help="Text to check")
    parser.add_argument("--dictionary", required=True, help="Frequency word list, one entry per line")
    parser.add_argument("--mode", choices=LEXICON_MODES, default="counted", help="Word list format")
    parser.add_argument("--alphabet", default=None, help="Use edit generation over these characters")
    parser.add_argument("--distance", type=int, default=settings.max_edit_distance)
    parser.add_argument("--limit", type=int, default=settings.suggestion_limit)
    parser.add_argument("--fix", action="store_true", help="Print the corrected text instead of a report")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level)

    checker = SpellChecker(load_lexicon(args.dictionary, mode=args.mode), alphabet=args.alphabet)
    text = " ".join(args.text)
    unknowns = checker.get_unknowns(text)

    if args.fix:
        print(checker.suggest(text, args.distance) or text)
        return 1 if unknowns else 0

    for token in unknowns:
        corrections = checker.get_corrections(token.text, args.distance, args.limit)
        print(f"{token.start}-{token.end}\t{token.text}\t{', '.join(corrections) or '-'}")

    logger.info("found %s unknown words", len(unknowns))
    return 1 if unknowns else 0


if __name__ == "__main__":
    sys.exit(main())
