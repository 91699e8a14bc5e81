#!/usr/bin/env python
"""Run the UPlayG API on Django's development server."""

import os
import sys

from django.core.management import execute_from_command_line


def main():
    """Start the development server on ``PORT`` (default 8000).

    Uses the custom 'runlocal' command, which creates any missing tables
    before serving so a fresh checkout starts without extra setup. Extra
    command line arguments are passed through to the command.
    """
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "uplayg.settings")
    os.environ.setdefault("DEBUG", "true")
    addrport = f"0.0.0.0:{os.getenv('PORT', '8000')}"
    execute_from_command_line([sys.argv[0], "runlocal", addrport, *sys.argv[1:]])


if __name__ == "__main__":
    main()
