"""Allow ``python -m cleanurls``."""

from cleanurls.cli.main import app

if __name__ == "__main__":
    app()
