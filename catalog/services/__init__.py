"""Services for the catalog app.

Each module exposes a service class and a module-level default instance.
"""
