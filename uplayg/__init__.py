"""UPlayG API Django project."""
