"""Allow ``python -m twoptr`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m twoptr`` behaves identically to the ``twoptr`` console script.
"""

from __future__ import annotations

from twoptr.cli.app import cli

if __name__ == "__main__":
    cli()
