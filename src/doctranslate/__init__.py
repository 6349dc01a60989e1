"""Document translation service: extract, translate and typeset uploaded documents."""

__version__ = "0.1.0"
