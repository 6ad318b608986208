"""Module entrypoint for ``python -m simpad``.

All argument parsing and runtime setup happen in ``simpad.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
