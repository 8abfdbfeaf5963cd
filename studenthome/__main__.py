"""
Package entry point.

Allows running the application via:

    python -m studenthome

This simply forwards execution to studenthome.cli.main().
"""

from studenthome.cli import main

if __name__ == "__main__":
    main()
