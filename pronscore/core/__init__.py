"""
Core modules for pronscore.

This package contains the scoring engine:
- Text normalization
- Word alignment
- Edit-distance similarity and word classification
- Aggregate scoring and tip generation

Primary API:
    from pronscore.core import analyze, generate_tips

    result = analyze("Hello, how are you?", "halo how r u")
    tips = generate_tips(result.judgments)
"""

# Primary API - what most users need
from pronscore.core.analyzer import analyze
from pronscore.core.tips import generate_tips

# Building blocks
from pronscore.core.aligner import AlignmentStrategy, align
from pronscore.core.classifier import classify
from pronscore.core.matcher import levenshtein, similarity
from pronscore.core.scoring import aggregate, grade
from pronscore.core.text import normalize, normalize_text

__all__ = [
    # Primary API
    "analyze",
    "generate_tips",
    # Building blocks
    "AlignmentStrategy",
    "align",
    "classify",
    "levenshtein",
    "similarity",
    "aggregate",
    "grade",
    "normalize",
    "normalize_text",
]
