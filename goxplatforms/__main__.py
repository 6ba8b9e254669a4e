"""
Entry point for running goxplatforms CLI as a module.

Usage: python -m goxplatforms [command] [options]
"""

from goxplatforms.cli.parser import main

if __name__ == "__main__":
    main()
