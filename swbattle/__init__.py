"""Turn-based grid battle simulator driven by scenario command files."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "combat",
    "commands",
    "domain",
    "effects",
    "events",
    "intents",
    "march",
    "parser",
    "pipeline",
    "world",
]