"""Pure domain logic for text normalization and whole-word keyword matching.

These primitives underlie every scorer.  All functions operate on strings and
resume objects -- no file I/O.
"""

from __future__ import annotations

import re
from typing import Any, List

from .inputs import as_resume

_NON_WORD_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize(text: Any) -> str:
    """Canonicalize *text* for comparison.

    Lower-cases, strips every character that is neither a word character nor
    whitespace, collapses whitespace runs and trims.  ``normalize`` is
    idempotent; non-string input normalizes to ``""``.
    """
    if not isinstance(text, str):
        return ""
    stripped = _NON_WORD_RE.sub("", text.lower())
    return _WHITESPACE_RE.sub(" ", stripped).strip()


def count_occurrences(haystack: Any, needle: Any) -> int:
    """Count whole-word, case-insensitive occurrences of *needle* in *haystack*.

    Multi-word needles match as a literal phrase bounded at both ends, so
    ``"java"`` is never counted inside ``"javascript"``.  An empty needle
    matches nothing.
    """
    phrase = normalize(needle)
    if not phrase:
        return 0
    pattern = re.compile(rf"\b{re.escape(phrase)}\b", re.IGNORECASE)
    return len(pattern.findall(normalize(haystack)))


def extract_resume_text(resume: Any) -> str:
    """Flatten a resume into one normalized text blob.

    Order: summary, experience (company, role, bullets), every skill category,
    education (degree, institution, details), additional sections (title,
    items).  Absent sections contribute nothing.
    """
    content = as_resume(resume)
    parts: List[str] = [content.summary]

    for entry in content.experience:
        parts.extend([entry.company, entry.role])
        parts.extend(entry.bullets)

    parts.extend(content.all_skills())

    for edu in content.education:
        parts.extend([edu.degree, edu.institution, edu.details])

    for section in content.additional_sections:
        parts.append(section.title)
        parts.extend(section.items)

    return normalize(" ".join(p for p in parts if p))
