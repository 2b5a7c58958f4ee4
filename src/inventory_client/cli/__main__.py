"""Run the inventory client CLI with ``python -m inventory_client.cli``."""

from __future__ import annotations

from .app import app

PROG_NAME = "inventory-client"


def main() -> None:  # pragma: no cover - thin wrapper
    app(prog_name=PROG_NAME)


if __name__ == "__main__":  # pragma: no cover - CLI entry
    main()
