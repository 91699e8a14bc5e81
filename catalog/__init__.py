"""UPlayG catalog application: apps, ratings, hero slides and uploads."""
