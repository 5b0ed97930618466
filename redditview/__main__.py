"""Entry point for running redditview as a module: python -m redditview"""

from redditview.cli.commands import app

if __name__ == "__main__":
    app()
