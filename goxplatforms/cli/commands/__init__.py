"""Command implementations for the goxplatforms CLI."""
