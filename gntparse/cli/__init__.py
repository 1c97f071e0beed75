"""
Command-line interface for gntparse.
"""

from gntparse.cli.main import app

__all__ = ["app"]
