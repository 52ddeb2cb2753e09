"""
Checklist module exceptions.

Every error the checklist store reports derives from ChecklistError, so a
failed Result always carries one of these.
"""

from typing import Optional

from shared.exceptions import (
    BoothdeskError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)


class ChecklistError(BoothdeskError):
    """Base exception for checklist errors."""

    pass


class ChecklistFetchError(ChecklistError, ExternalServiceError):
    """Raised when checklist items could not be read from storage."""

    def __init__(self, event_id: str, reason: str):
        super().__init__(
            f"Could not load checklist for event {event_id}: {reason}",
            service="supabase",
            code="CHECKLIST_FETCH_FAILED",
            details={"event_id": event_id},
        )


class ChecklistWriteError(ChecklistError, ExternalServiceError):
    """Raised when a checklist write failed in storage."""

    def __init__(self, operation: str, reason: str):
        super().__init__(
            f"Checklist {operation} failed: {reason}",
            service="supabase",
            code="CHECKLIST_WRITE_FAILED",
            details={"operation": operation},
        )


class ChecklistItemNotFoundError(ChecklistError, NotFoundError):
    """Raised when an item does not exist for this user."""

    def __init__(self, item_id: str):
        super().__init__(
            f"Checklist item not found: {item_id}",
            code="CHECKLIST_ITEM_NOT_FOUND",
            details={"item_id": item_id},
        )


class ChecklistValidationError(ChecklistError, ValidationError):
    """Raised for input the store refuses to write."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message, code="CHECKLIST_INVALID_INPUT", details=details)


class InvalidPhaseError(ChecklistError, ValidationError):
    """Raised when a stored row carries a phase outside pre/during/post."""

    def __init__(self, phase: object, item_id: Optional[str] = None):
        super().__init__(
            f"Invalid checklist phase: {phase!r}",
            code="INVALID_CHECKLIST_PHASE",
            details={"phase": str(phase), "item_id": item_id},
        )


class ReorderMismatchError(ChecklistError, ValidationError):
    """Raised when a reorder does not list exactly the items of the phase."""

    def __init__(self, event_id: str, phase: str, missing: list[str], unexpected: list[str]):
        super().__init__(
            "Reorder must list every item of the phase exactly once",
            code="CHECKLIST_REORDER_MISMATCH",
            details={
                "event_id": event_id,
                "phase": phase,
                "missing": missing,
                "unexpected": unexpected,
            },
        )


class InvalidMoveError(ChecklistError, ValidationError):
    """Raised when an item is already first (up) or last (down) in its phase."""

    def __init__(self, item_id: str, direction: str):
        super().__init__(
            f"Cannot move item {item_id} {direction}",
            code="CHECKLIST_INVALID_MOVE",
            details={"item_id": item_id, "direction": direction},
        )


class TemplateNotFoundError(ChecklistError, NotFoundError):
    """Raised for an unknown template id."""

    def __init__(self, template_id: str):
        super().__init__(
            f"Checklist template not found: {template_id}",
            code="CHECKLIST_TEMPLATE_NOT_FOUND",
            details={"template_id": template_id},
        )


class EmptySourceChecklistError(ChecklistError, ValidationError):
    """Raised when copying from an event that has no items."""

    def __init__(self, source_event_id: str):
        super().__init__(
            "O evento selecionado não possui itens no checklist.",
            code="CHECKLIST_SOURCE_EMPTY",
            details={"source_event_id": source_event_id},
        )
