"""
oulipy.commands.config_cmd - Inspect the active configuration.

Subcommands:
    path  Show which configuration file is in use
    show  Print the merged configuration (defaults, file, environment)
"""

import argparse
import json
import sys
from pathlib import Path

import tomlkit

from oulipy.commands.check import load_configuration
from oulipy.config import ConfigError, find_config_file


def run(args: argparse.Namespace) -> int:
    """Run the config command."""
    if args.config_action == "path":
        return show_path(args)
    if args.config_action == "show":
        return show_config(args)

    print("Usage: oulipy config {path,show}", file=sys.stderr)
    return 1


def show_path(args: argparse.Namespace) -> int:
    config_path = args.config or find_config_file(Path.cwd())
    if config_path is None:
        print("No configuration file found (using defaults)")
        return 0
    print(config_path)
    return 0


def show_config(args: argparse.Namespace) -> int:
    try:
        config = load_configuration(args)
    except ConfigError as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(config, indent=2, ensure_ascii=False))
    else:
        print(tomlkit.dumps(config), end="")
    return 0
