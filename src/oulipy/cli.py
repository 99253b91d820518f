"""
oulipy.cli - Command-line interface.

Main entry point for the oulipy CLI tool.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from oulipy import __version__
from oulipy.commands import check, completion, config_cmd, constraints_cmd, init
from oulipy.core.constraints import constraint_ids


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="oulipy",
        description="Writing constraint checks for French texts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  oulipy check poeme.txt -c lipogram -p e       # No "e" (nor é, è, ê, ë)
  oulipy check -c monovocalism -p a < texte.txt # Only the vowel "a"
  oulipy check *.txt -c tautogram -p p -j       # JSON output
  oulipy constraints                            # List constraints and options

Configuration:
  oulipy init                   # Create .oulipy.toml in current directory
  oulipy config path            # Show config file location
  oulipy config show            # View all settings

For detailed command help: oulipy <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"oulipy {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # check command
    check_parser = subparsers.add_parser(
        "check",
        help="Check texts against a writing constraint",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit codes:
  0  every text satisfies the constraint
  1  at least one text violates it
  2  usage or configuration error

Constraints:
  lipogram      Lipogramme: the letter is forbidden
  monovocalism  Monovocalisme: only this vowel is allowed
  tautogram     Tautogramme: every word starts with the letter
  alliteration  Allitération systématique: every word starts with the consonant
""",
    )
    check_parser.add_argument(
        "files",
        nargs="*",
        help="Text files to check ('-' or nothing reads stdin)",
        metavar="FILE",
    )
    check_parser.add_argument(
        "-c",
        "--constraint",
        choices=constraint_ids(),
        help="Constraint to apply (default: [check] constraint in config)",
    )
    check_parser.add_argument(
        "-p",
        "--param",
        help="Constraint letter (default: [check] param in config)",
        metavar="LETTER",
    )
    check_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output results as JSON",
    )

    # constraints command
    constraints_parser = subparsers.add_parser(
        "constraints",
        help="List available constraints and their parameters",
    )
    constraints_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    # init command
    init_parser = subparsers.add_parser(
        "init",
        help="Create .oulipy.toml configuration",
    )
    init_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite existing configuration",
    )

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="View configuration",
    )
    config_parser.add_argument(
        "config_action",
        choices=["path", "show"],
        help="path: show config file location, show: print merged settings",
    )
    config_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output as JSON (show only)",
    )

    # completion command
    completion_parser = subparsers.add_parser(
        "completion",
        help="Shell tab-completion setup",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
First, install the completion extra:
  pip install oulipy[completion]
""",
    )
    completion_parser.add_argument(
        "--shell",
        choices=list(completion.SHELLS),
        help="Target shell (default: detected from $SHELL)",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Shell tab-completion when the "completion" extra is installed
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "check":
            return check.run(args)
        elif args.command == "constraints":
            return constraints_cmd.run(args)
        elif args.command == "init":
            return init.run(args)
        elif args.command == "config":
            return config_cmd.run(args)
        elif args.command == "completion":
            return completion.run(args)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
