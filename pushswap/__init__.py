"""Two-stack integer sorting with a fixed instruction set, a checker, and small text helpers."""

__version__ = "0.1.0"