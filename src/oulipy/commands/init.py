"""
oulipy.commands.init - Create a .oulipy.toml configuration file.
"""

import argparse
import sys
from pathlib import Path

import tomlkit

from oulipy.config import CONFIG_FILENAME, default_config_document


def run(args: argparse.Namespace) -> int:
    """Write the default configuration into the current directory."""
    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists() and not args.force:
        print(f"Configuration file already exists: {config_path}", file=sys.stderr)
        print("Use --force to overwrite.", file=sys.stderr)
        return 1

    config_path.write_text(tomlkit.dumps(default_config_document()), encoding="utf-8")

    if not args.quiet:
        print(f"Created configuration file: {config_path}")
    return 0
