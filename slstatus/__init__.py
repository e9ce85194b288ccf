"""Status monitor that builds a one-line summary of system information."""

__version__ = "1.1"