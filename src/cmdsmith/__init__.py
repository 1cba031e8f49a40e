"""cmdsmith: turn a plain-English request into a shell command."""

__version__ = "0.1.0"
