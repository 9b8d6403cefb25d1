"""Module entrypoint for ``python -m kanjiview``."""

from .cli import main


if __name__ == "__main__":
    main()
