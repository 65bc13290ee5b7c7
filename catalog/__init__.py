"""market-catalog: cached catalog search with call instrumentation for timing and audit."""

__version__ = "0.1.0"
