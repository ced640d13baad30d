"""Allow ``python -m edgegraph``."""

from .cli import main

if __name__ == "__main__":
    main()
