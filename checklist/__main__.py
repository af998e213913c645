"""Entry point for running checklist as a module.

This allows running the application with:
    python -m checklist
"""

from checklist.cli import app

if __name__ == "__main__":
    app()
