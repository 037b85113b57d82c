"""Dictionary lookups rendered for the Sherlock launcher."""

__version__ = "0.1.0"
