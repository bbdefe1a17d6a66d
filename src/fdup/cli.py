#!/usr/bin/env python3
"""
fdup CLI: command line interface for duplicate file detection.
Walks a directory, prints one JSON array of paths per group of byte-identical files.
Read-only: files are never modified, moved or deleted.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import json
import sys
import os
from pathlib import Path
from typing import Iterable, List, NoReturn
import logging

logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from fdup.core.models import DeduplicationParams
from fdup.commands import DeduplicationCommand

EPILOG_TEXT = """
Examples:
  Find duplicates in Downloads folder
  %(prog)s ~/Downloads

  Same as above, members of each group in lexicographic order
  %(prog)s ~/Downloads --sort

  Save the report, keep warnings on the terminal
  %(prog)s ~/Downloads --sort > ~/duplicates.txt
"""


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        # Fix encoding for Windows consoles to prevent UnicodeEncodeError.
        # Undecodable file names reach us as lone surrogates; write their original bytes back.
        sys.stdout.reconfigure(encoding='utf-8', errors='surrogateescape')
        sys.stderr.reconfigure(encoding='utf-8', errors='backslashreplace')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="fdup",
            description="fdup: find files with byte-identical content",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "root",
            type=str,
            help="Root directory from which to start the search"
        )

        parser.add_argument(
            "--sort", "-s",
            action="store_true",
            help="Sort paths inside each duplicate group (lexicographic order)"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        root_path = Path(args.root)
        if not root_path.exists():
            self.error_exit(f"Directory not found: {args.root}")
        if not root_path.is_dir():
            self.error_exit(f"Path is not a directory: {args.root}")

    def create_params(self, args: argparse.Namespace) -> DeduplicationParams:
        """Create DeduplicationParams from CLI arguments."""
        try:
            return DeduplicationParams(root_dir=args.root, sort_groups=args.sort)
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    @staticmethod
    def format_group(group: List[str]) -> str:
        """One group per line, as a JSON array of paths."""
        return json.dumps(group, ensure_ascii=False)

    def output_results(self, groups: Iterable[List[str]]) -> int:
        """Stream groups to stdout as they are produced. Returns the number of groups printed."""
        count = 0
        for group in groups:
            print(self.format_group(group), flush=True)
            count += 1
        return count

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, args=None) -> None:
        """Main entry point."""
        args = self.parse_args(args)
        self.validate_args(args)
        params = self.create_params(args)

        command = DeduplicationCommand()
        count = self.output_results(command.execute(params))
        logging.getLogger(__name__).debug(f"Reported {count} duplicate groups")


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush cannot hit the closed pipe again."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except BrokenPipeError:
        # Reader went away (e.g. `fdup . | head -1`)
        _silence_stdout()
        sys.exit(0)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
