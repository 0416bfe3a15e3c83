"""
Plagiarism Similarity Engine

Scores a document against a reference corpus with cosine, n-gram and
fingerprint similarity, diagnoses copied sentences and suggests rewrites.
"""

__version__ = "1.0.0"
__author__ = "Plagiarism Engine Team"

from .core import *
