"""
Command line interface for generating yomiage drills.

Prints each generated problem, its answer and the announcer script,
or a JSON document with --json. Optionally writes a PDF worksheet.

Usage:
    yomiage --min-digit 3 --max-digit 6 --length 10 --subtractions 3
    python -m yomiage --count 20 --seed 7 --pdf output/drill.pdf
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import ConfigurationError, GenerationConfig
from .drill import DrillConfig, DrillResult, build_drill

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yomiage",
        description="Generate mental-calculation drill problems and announcer scripts.",
    )
    parser.add_argument("--min-digit", type=int, default=3, help="Minimum digit-length (default: 3)")
    parser.add_argument("--max-digit", type=int, default=6, help="Maximum digit-length (default: 6)")
    parser.add_argument("--length", type=int, default=10, help="Terms per problem (default: 10)")
    parser.add_argument("--subtractions", type=int, default=0, help="Negative terms per problem (default: 0)")
    parser.add_argument("--allow-negative", action="store_true", help="Allow negative running sums and answers")
    parser.add_argument("--count", type=int, default=1, help="Number of problems (default: 1)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible drills")
    parser.add_argument("--json", action="store_true", help="Print problems as JSON")
    parser.add_argument("--pdf", type=Path, default=None, help="Write a PDF worksheet to this path")
    parser.add_argument("--no-answer-key", action="store_true", help="Omit the answer key from the worksheet")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _print_text(result: DrillResult) -> None:
    for index, problem in enumerate(result.problems, 1):
        if len(result.problems) > 1:
            print(f"--- No. {index} ---")
        print(f"Problem: {list(problem.terms)}")
        print(f"Answer: {problem.answer}")
        print(problem.meta_script())
        print(problem.problem_script())
        print(problem.answer_script())


def _print_json(result: DrillResult) -> None:
    payload = {
        "seed": result.seed,
        "problems": [problem.to_dict() for problem in result.problems],
    }
    if result.worksheet_pdf is not None:
        payload["worksheet_pdf"] = str(result.worksheet_pdf)
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
    )

    try:
        generation = GenerationConfig(
            min_digit=args.min_digit,
            max_digit=args.max_digit,
            length=args.length,
            subtractions=args.subtractions,
            allow_negative=args.allow_negative,
        )
        config = DrillConfig(
            generation=generation,
            count=args.count,
            seed=args.seed,
            output_dir=args.pdf.parent if args.pdf else None,
            worksheet_name=args.pdf.name if args.pdf else "drill.pdf",
            include_answer_key=not args.no_answer_key,
        )
        result = build_drill(config)
    except ConfigurationError as e:
        print(f"error: {e.reason}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if result.worksheet_pdf is not None:
        logger.info(f"Worksheet written to {result.worksheet_pdf}")

    if args.json:
        _print_json(result)
    else:
        _print_text(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
