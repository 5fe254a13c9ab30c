# emilio/__main__.py
"""
Entry point for Emilio CLI.
"""
from emilio.components.cli import app
from emilio import init_application

if __name__ == "__main__":
    init_application()

    app()
