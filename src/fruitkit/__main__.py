"""Allow ``python -m fruitkit`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m fruitkit`` behaves identically to the ``fruitkit`` console
script.
"""

from __future__ import annotations

from fruitkit.cli.app import cli

if __name__ == "__main__":
    cli()
