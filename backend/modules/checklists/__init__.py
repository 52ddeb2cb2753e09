"""
Checklists module.

Per-event checklists ordered within each phase (pre, during, post).

Public API:
- IChecklistStore: Interface for checklist operations (Result-returning)
- ChecklistItem, ChecklistPhase: Stored items
- CopyMode, MoveDirection: Operation options
- CHECKLIST_TEMPLATES: Built-in templates
- Checklist exceptions: ChecklistError and subclasses
"""

from .interfaces import IChecklistStore
from .models import (
    ChecklistItem,
    ChecklistItemDraft,
    ChecklistPhase,
    ChecklistTemplate,
    CopyMode,
    MoveDirection,
)
from .exceptions import (
    ChecklistError,
    ChecklistFetchError,
    ChecklistWriteError,
    ChecklistItemNotFoundError,
    ChecklistValidationError,
    InvalidPhaseError,
    ReorderMismatchError,
    InvalidMoveError,
    TemplateNotFoundError,
    EmptySourceChecklistError,
)
from .templates import CHECKLIST_TEMPLATES, get_template

__all__ = [
    # Interface
    "IChecklistStore",
    # Models
    "ChecklistItem",
    "ChecklistItemDraft",
    "ChecklistPhase",
    "ChecklistTemplate",
    "CopyMode",
    "MoveDirection",
    # Templates
    "CHECKLIST_TEMPLATES",
    "get_template",
    # Exceptions
    "ChecklistError",
    "ChecklistFetchError",
    "ChecklistWriteError",
    "ChecklistItemNotFoundError",
    "ChecklistValidationError",
    "InvalidPhaseError",
    "ReorderMismatchError",
    "InvalidMoveError",
    "TemplateNotFoundError",
    "EmptySourceChecklistError",
]
