"""
oulipy.commands.check - Check texts against a writing constraint.

Reads each input (file path, or stdin for "-" / no input) and validates it
against the selected constraint. Exit codes:
    0  every input satisfies the constraint
    1  at least one input violates it
    2  usage or configuration error
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from oulipy.config import ConfigError, find_config_file, load_config
from oulipy.core.constraints import ConstraintDefinition, constraint_ids, get_constraint

EXIT_OK = 0
EXIT_VIOLATION = 1
EXIT_USAGE = 2

STDIN_SOURCE = "-"


def run(args: argparse.Namespace) -> int:
    """
    Run the check command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 valid, 1 violations, 2 usage errors)
    """
    try:
        config = load_configuration(args)
    except ConfigError as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return EXIT_USAGE

    check_config = config.get("check", {})
    constraint_id = args.constraint or check_config.get("constraint")
    param = args.param or check_config.get("param")

    definition = get_constraint(constraint_id) if constraint_id else None
    if definition is None:
        print(
            f"Error: Unknown constraint '{constraint_id}' "
            f"(available: {', '.join(constraint_ids())})",
            file=sys.stderr,
        )
        return EXIT_USAGE

    if not param:
        print(f"Error: Missing parameter ({definition.parameter.label})", file=sys.stderr)
        return EXIT_USAGE

    # Only offered options reach validate()
    if not definition.accepts(param):
        print(
            f"Error: Invalid parameter '{param}' for {definition.id.value} "
            f"(allowed: {' '.join(definition.parameter.options)})",
            file=sys.stderr,
        )
        return EXIT_USAGE

    try:
        inputs = read_inputs(args.files)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return EXIT_USAGE

    results = [check_text(definition, source, text, param) for source, text in inputs]

    output_format = "json" if args.json else config.get("output", {}).get("format", "text")
    if output_format == "json":
        print(json.dumps(results, indent=2, ensure_ascii=False))
    else:
        print_results(definition, results, quiet=args.quiet)

    if any(not r["isValid"] for r in results):
        return EXIT_VIOLATION
    return EXIT_OK


def load_configuration(args: argparse.Namespace) -> Dict[str, Any]:
    """Load configuration from --config, a discovered file, or defaults.

    Raises:
        ConfigError: If the configuration cannot be loaded
    """
    if args.config:
        config_path = args.config
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
    else:
        config_path = find_config_file(Path.cwd())
    return load_config(config_path)


def read_inputs(files: Optional[List[str]]) -> List[Tuple[str, str]]:
    """Read (source, text) pairs; no files means stdin."""
    if not files:
        files = [STDIN_SOURCE]

    inputs = []
    for name in files:
        if name == STDIN_SOURCE:
            inputs.append(("<stdin>", sys.stdin.read()))
        else:
            inputs.append((name, Path(name).read_text(encoding="utf-8")))
    return inputs


def check_text(
    definition: ConstraintDefinition, source: str, text: str, param: str
) -> Dict[str, Any]:
    """Validate one text and describe the outcome as a dictionary."""
    result = definition.validate(text, param)
    return {
        "source": source,
        "constraint": definition.id.value,
        "param": param.lower(),
        **result.to_dict(),
    }


def print_results(
    definition: ConstraintDefinition, results: List[Dict[str, Any]], quiet: bool = False
) -> None:
    """Print results in human-readable form."""
    for result in results:
        if result["isValid"]:
            if not quiet:
                print(f"✓ {result['source']}: {definition.name} ({result['param']})")
        else:
            print(f"❌ {result['source']}: {result['error']}")

    if quiet or len(results) < 2:
        return

    valid_count = sum(1 for r in results if r["isValid"])
    print("─" * 60)
    print(f"✓ {valid_count}/{len(results)} texts valid")
