"""Release automation for a single package of a JavaScript monorepo."""

__version__ = "0.1.0"
