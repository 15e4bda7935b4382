"""CLI entrypoint for the daily digest crossword generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .core.constants import DEFAULT_GRID_SIZE, DEFAULT_MAX_WORDS
from .core.exceptions import ConfigurationError
from .data.word_source import (
    BaseWordSource,
    GeminiWordSource,
    UserWordListSource,
    WordRequest,
    WordSource,
    merge_word_sources,
)
from .engine.generator import CrosswordConfig, CrosswordGenerator
from .utils.logger import configure_logging
from .utils.pretty import pretty_print_puzzle


# Enough candidates for a full puzzle once short and overlong words are dropped.
WORD_TARGET = 40


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate the crossword puzzle of a large-print daily digest",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Explicit candidate words (format: WORD or WORD:Clue)",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one WORD or WORD:Clue entry per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--city", type=str, default="", help="City the digest is for")
    parser.add_argument("--state", type=str, default="", help="State or region of the city")
    parser.add_argument(
        "--holiday",
        action="append",
        default=[],
        metavar="NAME",
        help="Upcoming holiday to theme LLM words around (repeatable)",
    )
    parser.add_argument(
        "--base-words",
        action="store_true",
        help="Add the built-in positive words plus the city name",
    )
    parser.add_argument(
        "--llm",
        action="store_true",
        help="Ask Gemini for local words and clues (requires --city and GEMINI_API_KEY)",
    )
    parser.add_argument("--grid-size", type=int, default=DEFAULT_GRID_SIZE, help="Grid side in cells")
    parser.add_argument("--max-words", type=int, default=DEFAULT_MAX_WORDS, help="Maximum words to place")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Print the grid and clue lists to stderr",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    has_user_words = bool(args.words or args.words_file)
    if not (has_user_words or args.base_words or args.llm):
        parser.error("provide --words, --words-file, --base-words or --llm")
    if (args.llm or args.base_words) and not args.city:
        parser.error("--llm and --base-words require --city")

    try:
        config = CrosswordConfig(
            grid_size=args.grid_size,
            max_words=args.max_words,
            seed=args.seed,
        )
    except ConfigurationError as exc:
        parser.error(str(exc))

    user_words: List[str] = []
    if args.words:
        user_words.extend(args.words)
    if args.words_file:
        user_words.extend(parse_words_file(args.words_file))

    primary: Optional[WordSource] = UserWordListSource(user_words) if user_words else None
    fallbacks: List[WordSource] = []
    if args.llm:
        fallbacks.append(GeminiWordSource())
    if args.base_words:
        fallbacks.append(BaseWordSource())

    request = WordRequest(city=args.city, state=args.state, holidays=args.holiday)
    candidates = merge_word_sources(primary, fallbacks, request, target=max(WORD_TARGET, len(user_words)))

    result = CrosswordGenerator(config).generate(candidates.words, candidates.clues)
    if args.pretty:
        pretty_print_puzzle(result, stream=sys.stderr)

    output_text = json.dumps(result.to_jsonable(), ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
