"""Error taxonomy for plan construction and per-file extraction."""


class TabulaError(Exception):
    """Base class for errors raised by tabula-cli."""


class ConfigurationError(TabulaError, ValueError):
    """Malformed or contradictory command-line input, detected before any I/O."""


class InputError(TabulaError):
    """Input document missing, unreadable, encrypted with another password, or corrupt."""


class OutputError(TabulaError):
    """Output sink cannot be created or written."""
