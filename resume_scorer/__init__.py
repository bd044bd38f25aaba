"""Resume Scorer - deterministic resume-to-job matching, skills-gap and salary estimation."""

__version__ = "0.1.0"
