"""Top-level package for apinormalizer.

This package rewrites marker-annotated public-API text from a reflection-driven
emitter into clean, diff-stable source. The main entry points are `normalize`
and `CodeNormalizer`.
"""

from .errors import NormalizationError, UnresolvedMarkerError
from .text.normalizer import CodeNormalizer, NormalizationReport, normalize, normalize_writer

__all__ = [
    "CodeNormalizer",
    "NormalizationError",
    "NormalizationReport",
    "UnresolvedMarkerError",
    "normalize",
    "normalize_writer",
    "__version__",
]

__version__ = "0.1.0"
