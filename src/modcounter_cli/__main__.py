"""
__main__.py - Entry point for `python -m modcounter_cli`
"""

from modcounter_cli.cli import main

if __name__ == "__main__":
    main()
