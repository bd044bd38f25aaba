"""Resume Scorer web API."""
