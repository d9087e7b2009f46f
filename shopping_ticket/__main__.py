"""
Main entry point for running shopping_ticket as a module.

This allows the package to be run with: python -m shopping_ticket
"""

from .src.cli import main

if __name__ == '__main__':
    main()
