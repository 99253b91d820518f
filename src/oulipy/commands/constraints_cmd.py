"""
oulipy.commands.constraints_cmd - List the available constraints.
"""

import argparse
import json

from oulipy.core.constraints import CONSTRAINTS


def run(args: argparse.Namespace) -> int:
    """Print every constraint with its parameter and allowed options."""
    if args.json:
        print(json.dumps([c.to_dict() for c in CONSTRAINTS], indent=2, ensure_ascii=False))
        return 0

    for definition in CONSTRAINTS:
        spec = definition.parameter
        print(f"{definition.id.value}  {definition.name}")
        print(f"   {definition.description}")
        print(f"   {spec.label} ({spec.kind.value}): {' '.join(spec.options)}")
        print()
    return 0
