"""
prose_metrics package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import EngineConfig, config_from_dict, config_from_yaml, load_config
from .conflicts import apply_resolution
from .engine import TextProcessor
from .models import (
    AnalysisResult,
    CollaborationConflict,
    ComplexityMetrics,
    Document,
    OptimizationSuggestion,
    StyleMetrics,
    conflict_from_dict,
)
from .patterns import PatternCompileError
from .syllables import count_syllables

__all__ = [
    "EngineConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "TextProcessor",
    "PatternCompileError",
    "AnalysisResult",
    "ComplexityMetrics",
    "StyleMetrics",
    "OptimizationSuggestion",
    "CollaborationConflict",
    "Document",
    "conflict_from_dict",
    "apply_resolution",
    "count_syllables",
]

__version__ = "0.1.0"
