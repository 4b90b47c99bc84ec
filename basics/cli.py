from __future__ import annotations

import argparse
import sys

from . import lessons  # noqa: F401  (registers the lessons)
from .config import ConfigurationError, check_log_level, check_model_name, load_config
from .logger import configure_logging, log_message
from .max_finder import describe_max, find_max
from .registry import UnknownLessonError, get_registry
from .validators import parse_int_sequence

EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lang-basics", description="Run small lessons on basic language mechanics")
    parser.add_argument("--log-level", default=None, help="Override LANG_BASICS_LOG_LEVEL (e.g. DEBUG)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="List the available lessons")

    p_run = sub.add_parser("run", help="Run a lesson and print its output")
    p_run.add_argument("name", help="Lesson name (see 'list')")

    p_max = sub.add_parser("max", help="Print the maximum of the given integers")
    p_max.add_argument("numbers", nargs="*", help="Integers, e.g. 3 5 2 1 4")

    p_ask = sub.add_parser("ask", help="Ask the tutor agent a question")
    p_ask.add_argument("question", help="Question for the tutor")
    p_ask.add_argument("--model", default=None, help="provider:model, overrides LANG_BASICS_TUTOR_MODEL")

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config()
        level = check_log_level(args.log_level) if args.log_level else config.logging.level
        model = check_model_name(args.model) if getattr(args, "model", None) else config.tutor.model
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    configure_logging(level, config.logging.file)

    if args.cmd == "list":
        for lesson in get_registry().lessons():
            print(f"{lesson.name:<14}{lesson.summary}")

    elif args.cmd == "run":
        try:
            lines = get_registry().run(args.name)
        except UnknownLessonError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return EXIT_USAGE
        log_message(f"Running lesson {args.name}")
        for line in lines:
            print(line)

    elif args.cmd == "max":
        try:
            numbers = parse_int_sequence(args.numbers)
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return EXIT_USAGE
        print(describe_max(find_max(numbers)))

    elif args.cmd == "ask":
        from .agent import build_agent

        agent = build_agent(model)
        response = agent.invoke({"messages": [{"role": "user", "content": args.question}]})
        print(response["messages"][-1].content)

    return 0


if __name__ == "__main__":
    sys.exit(main())
