"""Module entrypoint for ``python -m dirtree``."""

from .cli import main


if __name__ == "__main__":
    main()
