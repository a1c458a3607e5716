import argparse
import json
import sys
from typing import Iterable, List, Optional

from grammar import EBNF, TokenJSONEncoder
from parsers import Evaluator

PROMPT = "Enter expression: "


def report(evaluator: Evaluator, line: str, show_tokens: bool, as_json: bool) -> bool:
    valid = evaluator.evaluate(line)
    if as_json:
        print(json.dumps(evaluator.last, cls=TokenJSONEncoder))
        return valid

    verdict = "is a valid expression" if valid else "is not a valid expression."
    print(f'"{line}" {verdict}')
    if show_tokens:
        print(evaluator.format_tokens())
    return valid


def read_lines(prompt: str) -> Iterable[str]:
    while True:
        try:
            line = input(prompt)
        except EOFError:
            return
        if not line:
            return
        yield line


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprcheck",
        description="Check whether arithmetic expressions follow the grammar below.",
        epilog="grammar:" + EBNF,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("expressions", nargs="*",
                        help="expressions to check; without any, read lines until an empty one")
    parser.add_argument("-t", "--tokens", action="store_true", help="print the tokens consumed")
    parser.add_argument("--json", action="store_true", help="print one JSON object per expression")
    parser.add_argument("--max-depth", type=int,
                        help="reject expressions nesting more factors than this (default: no limit)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    if args.max_depth is not None and args.max_depth < 1:
        print(f"--max-depth must be positive, got {args.max_depth}", file=sys.stderr)
        return 2

    evaluator = Evaluator(args.max_depth)
    if args.expressions:
        results = [report(evaluator, e, args.tokens, args.json) for e in args.expressions]
        return 0 if all(results) else 1

    for line in read_lines("" if args.json else PROMPT):
        report(evaluator, line, args.tokens, args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
