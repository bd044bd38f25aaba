"""Wire contracts for the Resume Scorer service."""
