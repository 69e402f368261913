"""iconlint — geometric and stylistic linter for 24x24 icon path data."""

__version__ = "0.1.0"
