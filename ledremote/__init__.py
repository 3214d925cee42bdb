"""Button debouncing, effect messages, LED strip effects and the one-button remote state machine."""

__version__ = "0.1.0"

__all__ = ["debouncer", "message", "effects", "remote"]