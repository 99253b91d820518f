"""
oulipy.commands.completion - Shell tab-completion instructions.

Completion itself is provided by argcomplete (the "completion" extra);
this command prints the activation line for the user's shell.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

SHELLS = ("bash", "zsh", "fish", "tcsh")

_ACTIVATION = {
    "bash": 'eval "$(register-python-argcomplete oulipy)"',
    "zsh": 'eval "$(register-python-argcomplete oulipy)"',
    "fish": "register-python-argcomplete --shell fish oulipy | source",
    "tcsh": "eval `register-python-argcomplete --shell tcsh oulipy`",
}

_RC_FILES = {
    "bash": Path(".bashrc"),
    "zsh": Path(".zshrc"),
    "fish": Path(".config") / "fish" / "config.fish",
    "tcsh": Path(".tcshrc"),
}


def detect_shell() -> str:
    """Detect the current shell from $SHELL, defaulting to bash."""
    shell = os.environ.get("SHELL", "")
    basename = Path(shell).name if shell else ""
    return basename if basename in SHELLS else "bash"


def argcomplete_available() -> bool:
    try:
        import argcomplete  # noqa: F401

        return True
    except ImportError:
        return False


def run(args) -> int:
    """Handle ``oulipy completion``."""
    if not argcomplete_available():
        print("Error: argcomplete is not installed.", file=sys.stderr)
        print("Install with: pip install oulipy[completion]", file=sys.stderr)
        return 1

    shell = getattr(args, "shell", None) or detect_shell()
    print(f"Shell completion for {shell}:")
    print()
    print(f"Add the following to ~/{_RC_FILES[shell]}:")
    print()
    print(f"  {_ACTIVATION[shell]}")
    return 0
