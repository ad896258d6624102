"""Main entry point for screenwrite CLI when run as a module."""

from screenwrite.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
