"""ANSI color codes for terminal log output.

All colors use the 256-color palette.

Usage:
    from jsonrpc_core.logging.colors import CYAN, RESET

    print(f"{CYAN}ok{RESET}")
"""

# Basic colors
RESET = "\033[0m"

# Level colors
LIGHT_BLUE = "\033[38;5;153m"  # Debug / extra fields
CYAN = "\033[38;5;51m"  # Info
YELLOW = "\033[38;5;226m"  # Warnings
RED = "\033[38;5;196m"  # Errors

# Component names
MAGENTA = "\033[38;5;201m"

__all__ = [
    "RESET",
    "LIGHT_BLUE",
    "CYAN",
    "YELLOW",
    "RED",
    "MAGENTA",
]
