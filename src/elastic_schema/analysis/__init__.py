"""Analysis pipeline exports."""

from .analyzer_blueprint import AnalyzerBlueprint
from .analyzer_models import AnalyzerDefinition, AnalyzerKind

__all__ = [
    "AnalyzerBlueprint",
    "AnalyzerDefinition",
    "AnalyzerKind",
]
