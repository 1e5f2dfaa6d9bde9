"""
Entry point for running keytrans as a module.

Usage:
    python -m keytrans --help
    python -m keytrans translate en.yml translated.yml --backend dummy
    python -m keytrans locales
"""
from .cli import app


if __name__ == "__main__":
    app()
