"""
Minitools.

Two small utilities sharing one command line: a timed quiz runner driven by a
CSV file of question/answer pairs, and a path-to-URL redirector served over
ASGI with a chain of fallback handlers.
"""

from .config.loader import load_settings

__all__ = ["load_settings"]
