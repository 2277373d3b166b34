"""Console script entry point with production wiring.

Stands in for the ``hello`` executable linked against the library: it wires
production services from the composition layer and hands control to the CLI.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``hellolib`` console script and return its exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
