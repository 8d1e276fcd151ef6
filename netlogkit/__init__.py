"""Network connection log analysis with graphs, search trees, hash maps and reports."""

__version__ = "0.1.0"