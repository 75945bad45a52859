"""pricemovers command-line interface.

Exposes:
    cli -- Click command entry point (registered as ``pricemovers`` script).
"""

from pricemovers.cli.main import cli

__all__ = ["cli"]
