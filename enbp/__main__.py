"""Allow ``python -m enbp``."""

from enbp.cli import main

if __name__ == "__main__":
    main()
