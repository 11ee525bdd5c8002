"""Allow ``python -m courseplanner``."""

from courseplanner.cli import main

if __name__ == "__main__":
    main()
