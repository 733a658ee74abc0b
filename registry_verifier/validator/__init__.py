"""Data tree traversal and result reporting."""

from .report import Diagnostic, DiagnosticCategory, ValidationReport
from .tree_validator import EntryKind, TreeValidator, classify_entry, validate_tree

__all__ = [
    'Diagnostic',
    'DiagnosticCategory',
    'EntryKind',
    'TreeValidator',
    'ValidationReport',
    'classify_entry',
    'validate_tree',
]
