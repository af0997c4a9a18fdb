# AGPL-3.0 License

"""
Command-line interface for PR Pair (installed as `pr-pair`).

Usage examples::

    # Print the checklist for the last commit
    pr-pair generate

    # Checklist for a branch, written to a file
    pr-pair generate -b origin/main -h HEAD -o checklist.md

    # Post the checklist to PR #42 (needs GITHUB_TOKEN and GITHUB_REPOSITORY)
    pr-pair add-to-pr -n 42 -b origin/main

    # Write a sample configuration file
    pr-pair init

Because `-h` selects the head ref, subcommand help is only available as `--help`.
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from pr_pair import __version__
from pr_pair.config.sample_config import DEFAULT_SAMPLE_PATH, create_sample_config
from pr_pair.log import get_logger, setup_logger_from_env
from pr_pair.tools.pr_checklist import DEFAULT_BASE_REF, DEFAULT_HEAD_REF, PRChecklist


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on invalid arguments, like every other CLI error."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _add_help_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--help", action="help", help="Show this help message and exit.")


def _add_checklist_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-c", "--config", type=Path, default=None, help="Path to configuration file.")
    parser.add_argument("-b", "--base", default=None, help=f"Base git reference (default: {DEFAULT_BASE_REF}).")
    parser.add_argument("-h", "--head", default=None, help=f"Head git reference (default: {DEFAULT_HEAD_REF}).")


def set_parser() -> argparse.ArgumentParser:
    parser = ArgumentParser(
        prog="pr-pair",
        description="Generate a checklist for pull requests based on changed files.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    generate = subparsers.add_parser(
        "generate",
        add_help=False,
        help="Generate a checklist based on changed files.",
        description="Generate a checklist based on changed files.",
    )
    _add_help_option(generate)
    _add_checklist_options(generate)
    generate.add_argument("-o", "--output", type=Path, default=None, help="Output file path (default: stdout).")
    generate.add_argument("-p", "--pr", action="store_true", help="Add the checklist to the PR.")

    init = subparsers.add_parser(
        "init",
        add_help=False,
        help="Create a sample configuration file.",
        description="Create a sample configuration file.",
    )
    _add_help_option(init)
    init.add_argument(
        "-o", "--output", type=Path, default=Path(DEFAULT_SAMPLE_PATH),
        help=f"Output file path (default: {DEFAULT_SAMPLE_PATH}).",
    )

    add_to_pr = subparsers.add_parser(
        "add-to-pr",
        add_help=False,
        help="Add a checklist to a PR.",
        description="Add a checklist to a PR.",
    )
    _add_help_option(add_to_pr)
    add_to_pr.add_argument("-n", "--number", type=int, required=True, help="PR number.")
    _add_checklist_options(add_to_pr)

    return parser


def _run_generate(args: argparse.Namespace) -> int:
    tool = PRChecklist(
        config_path=args.config,
        base_ref=args.base,
        head_ref=args.head,
        add_to_pr=args.pr,
    )
    checklist = asyncio.run(tool.run())

    if args.pr:
        print(_published_message(tool), file=sys.stderr)

    if args.output:
        args.output.write_text(checklist, encoding="utf-8")
        print(f"Checklist written to {args.output}")
    else:
        print(checklist)
    return 0


def _run_init(args: argparse.Namespace) -> int:
    output_path = create_sample_config(args.output)
    print(f"Sample configuration written to {output_path}")
    return 0


def _run_add_to_pr(args: argparse.Namespace) -> int:
    tool = PRChecklist(
        config_path=args.config,
        base_ref=args.base,
        head_ref=args.head,
        add_to_pr=True,
        pr_number=args.number,
    )
    asyncio.run(tool.run())
    print(_published_message(tool))
    return 0


def _published_message(tool: PRChecklist) -> str:
    github = tool.config.github
    if github.add_as_comment:
        return f"Checklist added as comment to PR #{github.pr_number}"
    return f"PR #{github.pr_number} description updated with checklist"


COMMANDS = {
    "generate": (_run_generate, "Error generating checklist"),
    "init": (_run_init, "Error creating sample configuration"),
    "add-to-pr": (_run_add_to_pr, "Error adding checklist to PR"),
}


def run(argv: Optional[List[str]] = None) -> int:
    setup_logger_from_env()
    parser = set_parser()
    args = parser.parse_args(argv)

    handler, error_prefix = COMMANDS[args.command]
    try:
        return handler(args)
    except Exception as e:
        get_logger().opt(exception=e).debug(error_prefix)
        print(f"{error_prefix}: {e}", file=sys.stderr)
        return 1


def main():
    sys.exit(run())


if __name__ == '__main__':
    main()
