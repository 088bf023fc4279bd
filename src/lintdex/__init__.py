"""
lintdex - static-analysis rule catalog

lintdex lists the rules a linter ships with, shows which of them a project's
configuration activates, and prints the full documentation of a single rule.
"""

__version__ = "0.4.0"
__all__ = ["__version__"]
