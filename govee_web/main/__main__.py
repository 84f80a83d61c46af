"""
Main module entry point.

This allows running the CLI as: python -m govee_web.main
"""

from .cli import main

if __name__ == "__main__":
    main()
