"""Entry point for ``python -m modaltui``."""

from .cli import main

if __name__ == "__main__":
    main()
