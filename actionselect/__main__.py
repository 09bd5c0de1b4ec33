"""Allow ``python -m actionselect``."""

from actionselect.cli.cli import main

if __name__ == "__main__":
    main()
