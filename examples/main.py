"""
Entry point.

Run: uv run python -m examples.main
"""

from examples._infra import run
from examples.cli import run_cli


if __name__ == "__main__":
    run(run_cli)
