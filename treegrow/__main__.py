"""Module entrypoint for ``python -m treegrow``."""

from .cli import main


if __name__ == "__main__":
    main()
