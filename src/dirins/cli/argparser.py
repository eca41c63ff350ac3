"""Command-line argument parsing for dirins.

This module defines the command-line interface for dirins,
handling argument parsing and validation.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from dirins import __version__
from dirins.status.base_status import BaseStatusLookup


def create_exclusion_action(status_lookup: BaseStatusLookup) -> Type[argparse.Action]:
    """Create an action class that feeds ignore rules to a status lookup.

    Rules are handed over while arguments are parsed, so ``-e`` files and ``-i``
    patterns apply in the order they appear on the command line.

    Args:
        status_lookup: The lookup receiving the rules.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                rules_file = values if isinstance(values, (str, os.PathLike)) else Path(str(values))
                try:
                    status_lookup.load_rules(rules_file)
                except FileNotFoundError as e:
                    parser.error(str(e))
            else:  # -i/--ignore
                status_lookup.add_rule(str(values))

            recorded = getattr(namespace, self.dest, None) or []
            setattr(namespace, self.dest, recorded + [values])

    return ExclusionRulesAction


def create_parser(status_lookup: BaseStatusLookup) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        status_lookup: The lookup that ``-e``/``-i`` rules are added to.

    Returns:
        An ArgumentParser instance configured with dirins's options.
    """
    description = """
    dirins: list a project directory as an indented tree, for use as LLM context.

    Files are listed before subdirectories. Binary files, UUID-named JSON cache files,
    the .idea metadata directory and directories ignored by .gitignore rules are left out.
    """

    epilog = """
    Examples:
      # List a directory of the project in the current working directory
      dirins src

      # List a directory of another project
      dirins -p /path/to/project src/main

      # Add ignore rules from files and individual patterns
      dirins -e .dockerignore -i "node_modules/" -i "!keep/" .

      # Do not read <project>/.gitignore
      dirins --no-gitignore .

      # Write to a file and append a summary with a token count
      dirins -o tree.txt -s file -t gpt-4 .
    """

    parser = argparse.ArgumentParser(
        prog="dirins",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dirins {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(status_lookup)

    parser.add_argument(
        "path",
        help="Directory to list, relative to the project root or absolute. Printed verbatim as the first line.",
    )
    parser.add_argument(
        "-p",
        "--project",
        type=Path,
        default=Path("."),
        metavar="DIR",
        help="Project root that relative paths and ignore rules are anchored to (default: current directory).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="File with gitignore-style rules for directories to leave out (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Individual gitignore-style pattern for directories to leave out. Can be specified multiple "
            "times; patterns apply in the order they appear, mixed with -e/--exclude options."
        ),
    )
    parser.add_argument(
        "--no-gitignore",
        action="store_true",
        help="Do not load <project>/.gitignore.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout", "file"],
        help="Print summary report. Valid destinations: stderr, stdout, file (requires -o)",
    )
    parser.add_argument(
        "-t",
        "--tokenizer",
        metavar="MODEL",
        help="Tokenizer model to use for counting tokens (e.g., gpt-4). Specifying this enables token counting.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate option combinations argparse cannot express.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.summary == "file" and not args.output:
        raise ValueError("--summary=file requires -o/--output to be specified")
    if not args.project.is_dir():
        raise ValueError(f"Project root is not a directory: {args.project}")
