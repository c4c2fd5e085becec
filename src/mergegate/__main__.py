"""Allow ``python -m mergegate``."""

from mergegate.cli.verify import verify

if __name__ == "__main__":
    verify()
