"""Allow ``python -m sssp``."""

from sssp.cli import main

if __name__ == "__main__":
    main()
