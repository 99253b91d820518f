"""
oulipy.config.defaults - Default configuration values.
"""

CONFIG_FILENAME = ".oulipy.toml"

ENV_PREFIX = "OULIPY_"

DEFAULT_CONFIG = {
    "check": {
        "constraint": "lipogram",
        "param": "e",
    },
    "output": {
        "format": "text",
    },
}

OUTPUT_FORMATS = ("text", "json")
