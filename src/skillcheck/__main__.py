"""Allow ``python -m skillcheck`` to behave like the CLI entry point."""

from skillcheck.cli import main

if __name__ == "__main__":  # pragma: no cover
    main()
