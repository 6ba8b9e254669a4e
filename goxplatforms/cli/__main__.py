"""
Entry point for running goxplatforms CLI as a module.

Usage: python -m goxplatforms.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
