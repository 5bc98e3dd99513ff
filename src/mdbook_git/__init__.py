__version__ = "0.1.0"

__all__ = [
    "__version__",
    "book",
    "cli",
    "contracts",
    "core",
    "errors",
    "exit_codes",
    "markup",
]
