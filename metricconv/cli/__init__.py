"""metricconv CLI - Main entry point."""
import sys

from .main import app, console


def main():
    """Main entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(1)


# Legacy support
cli = app

__all__ = ["app", "main", "cli"]
