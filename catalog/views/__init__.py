"""API views for the catalog app."""
