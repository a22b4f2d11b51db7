"""Directory layout, path helpers and interactive task-parameter values."""

__version__ = "0.1.0"