"""Command line screen resolution switcher.

Resolves positional set-mode arguments into a display request, matches it
against the modes the display system reports and applies the result.
"""

__version__ = "1.0.0"

__all__ = [
    "display",
    "check_required_bins",
]
