"""Production entry point for the UPlayG API.

Runs the WSGI application under Gunicorn; used by the container image.
"""

import os
import sys

from gunicorn.app.wsgiapp import run


def gunicorn_argv() -> list[str]:
    """Build Gunicorn's command line from the environment.

    - PORT: listen port (default 8000)
    - WEB_CONCURRENCY: worker processes (default 4)
    - GUNICORN_THREADS: threads per worker (default 2)
    - GUNICORN_TIMEOUT: request timeout in seconds, sized for multi-file
      uploads (default 60)
    """
    return [
        "gunicorn",
        "uplayg.wsgi:application",
        "--bind",
        f"0.0.0.0:{os.getenv('PORT', '8000')}",
        "--workers",
        os.getenv("WEB_CONCURRENCY", "4"),
        "--threads",
        os.getenv("GUNICORN_THREADS", "2"),
        "--timeout",
        os.getenv("GUNICORN_TIMEOUT", "60"),
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]


def main():
    """Start the API under Gunicorn, logging to stdout/stderr."""
    sys.argv = gunicorn_argv()
    run()


if __name__ == "__main__":
    main()
