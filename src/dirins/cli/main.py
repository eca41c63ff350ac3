"""Command-line interface for dirins.

This module provides the ``dirins`` command, which prints the indented tree of a
project directory. It handles argument parsing, output, the optional summary and
signal management for graceful interruption.

Exit Codes:
    0: Successful completion
    1: Runtime error, or the path was not found / is not a directory
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # List the src directory of the project in the current directory
    $ dirins src

    # List another project's directory, with extra ignore patterns
    $ dirins -p /path/to/project -i "dist/" .
"""

import sys
from collections.abc import Mapping
from typing import Optional

from dirins.cli.argparser import create_parser, validate_args
from dirins.cli.safe_writer import SafeWriter
from dirins.cli.signal_handler import setup_signal_handling, signal_handler
from dirins.dir_command import DirCommand
from dirins.exceptions import DirectoryNotFoundError, PathNotFoundError, TokenizerNotAvailableError
from dirins.project import ProjectContext
from dirins.status.gitignore_status import GitIgnoreStatusLookup
from dirins.token_counter import TokenCounter

NOT_FOUND_PREFIXES = (str(PathNotFoundError("")), str(DirectoryNotFoundError("")))


def format_counts(counts: Mapping[str, Optional[int]]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping with directories, files, lines, characters and tokens.

    Returns:
        One ``Label: value`` line per count; tokens only when counted.
    """
    result = [
        f"Directories: {counts['directories']}",
        f"Files: {counts['files']}",
        f"Lines: {counts['lines']}",
        f"Characters: {counts['characters']}",
    ]

    if counts["tokens"] is not None:
        result.append(f"Tokens: {counts['tokens']}")

    return "\n".join(result)


def is_not_found(result: str) -> bool:
    """Check whether a command result is one of the not-found messages."""
    return result.startswith(NOT_FOUND_PREFIXES)


def count_entries(tree: str) -> Mapping[str, int]:
    """Count directory and file lines of a rendered tree, not counting the root line."""
    entries = tree.splitlines()[1:]
    directories = sum(1 for line in entries if line.endswith("/"))
    return {"directories": directories, "files": len(entries) - directories}


def main() -> None:
    """Main entry point for the dirins command-line interface."""
    setup_signal_handling()

    try:
        # Rules from -e/-i are added while parsing; the root is set once -p is known
        status_lookup = GitIgnoreStatusLookup(".", load_default=False)

        parser = create_parser(status_lookup)
        args = parser.parse_args()
        validate_args(args)

        status_lookup.set_root(args.project)
        if not args.no_gitignore:
            status_lookup.load_default_rules()

        counter = TokenCounter(model=args.tokenizer)

        with ProjectContext(args.project, status_lookup=status_lookup) as project:
            result = DirCommand(project, args.path).execute()

        if is_not_found(result):
            print(f"Error: {result}", file=sys.stderr)
            sys.exit(1)

        output_file = args.output if args.output else sys.stdout.fileno()

        with SafeWriter(output_file) as safe_writer:
            try:
                safe_writer.write(result)

                if args.summary:
                    counter.count(result)
                    counts = {
                        **count_entries(result),
                        "lines": counter.get_total_lines(),
                        "characters": counter.get_total_characters(),
                        "tokens": counter.get_total_tokens(),
                    }
                    count_output_str = format_counts(counts)

                    if args.summary in ("stdout", "file"):
                        safe_writer.write("\n" + count_output_str + "\n")
                    else:
                        print(count_output_str, file=sys.stderr)

            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except TokenizerNotAvailableError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        print("To enable token counting, install dirins with the 'token_counting' extra:", file=sys.stderr)
        print('    pip install "dirins[token_counting]"', file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    if signal_handler.sigpipe_received.is_set():
        sys.exit(141)
    elif signal_handler.sigint_received.is_set():
        sys.exit(130)


if __name__ == "__main__":
    main()
