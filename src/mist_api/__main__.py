"""Permite `python -m mist_api ...`."""

from __future__ import annotations

from mist_api.cli.main import run

if __name__ == "__main__":
    run()
