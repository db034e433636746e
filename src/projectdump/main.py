from __future__ import annotations

from projectdump.interface.cli import cli


def main() -> None:
    """Console-script entry point."""
    cli()


if __name__ == "__main__":
    main()
