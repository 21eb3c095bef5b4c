"""Allow ``python -m ippure``."""

from .agent import main


if __name__ == "__main__":
    main()
