"""
oulipy.commands - CLI command implementations
"""

__all__ = [
    "check",
    "completion",
    "config_cmd",
    "constraints_cmd",
    "init",
]
