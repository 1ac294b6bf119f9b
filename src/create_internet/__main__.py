"""Allow ``python -m create_internet``."""

from create_internet.cli.main import app

if __name__ == "__main__":
    app()
