"""Interactive yes/no confirmation for destructive operations."""
from __future__ import annotations


def ask_confirmation(message: str, default: bool = False) -> bool:
    """Ask a yes/no question on the terminal.
    
    Args:
        message: Question to display
        default: Answer assumed on an empty reply
        
    Returns:
        True if the user agreed
    """
    suffix = " (Y/n) " if default else " (y/N) "
    while True:
        try:
            answer = input(message + suffix).strip().lower()
        except EOFError:
            return default
        if not answer:
            return default
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
