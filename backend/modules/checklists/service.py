"""
Checklist store implementation.

Items of one event are ordered per phase by ``position``. New items are
appended (max position + 1, or 0 for an empty phase); reorder and move
rewrite positions; removals leave gaps.

Every public operation returns a Result. Failures are logged here and
never raised to the caller.
"""

import logging
import time
from typing import Any, Callable, Optional

from cachetools import TTLCache

from shared.result import Result

from .exceptions import (
    ChecklistError,
    ChecklistFetchError,
    ChecklistItemNotFoundError,
    ChecklistValidationError,
    ChecklistWriteError,
    EmptySourceChecklistError,
    InvalidMoveError,
    ReorderMismatchError,
    TemplateNotFoundError,
)
from .models import (
    ChecklistItem,
    ChecklistItemDraft,
    ChecklistPhase,
    CopyMode,
    MoveDirection,
)
from .repository import ChecklistItemRepository
from .templates import get_template

logger = logging.getLogger(__name__)

CacheKey = tuple[str, str]

DEFAULT_CACHE_SIZE = 1024
DEFAULT_CACHE_TTL_SECONDS = 30.0


def _clean_text(text: Optional[str]) -> str:
    cleaned = (text or "").strip()
    if not cleaned:
        raise ChecklistValidationError("Checklist item text cannot be empty")
    return cleaned


def _next_positions(items: list[ChecklistItem]) -> dict[ChecklistPhase, int]:
    """Append position for each phase given the items already stored."""
    positions: dict[ChecklistPhase, int] = {}
    for phase in ChecklistPhase:
        existing = [item.position for item in items if item.phase == phase]
        positions[phase] = max(existing) + 1 if existing else 0
    return positions


class ChecklistItemStore:
    """
    Checklist operations scoped by (user_id, event_id).

    Keeps the item list of each (user_id, event_id) in memory after the
    first read. Entries expire after ``cache_ttl`` seconds and the least
    recently used ones are evicted past ``cache_size``. Any mutation of an
    event, or deletion of the event itself, drops its entry.
    """

    def __init__(
        self,
        repository: ChecklistItemRepository,
        cache_size: int = DEFAULT_CACHE_SIZE,
        cache_ttl: float = DEFAULT_CACHE_TTL_SECONDS,
        timer: Callable[[], float] = time.monotonic,
    ):
        self._repository = repository
        self._cache: TTLCache = TTLCache(maxsize=cache_size, ttl=cache_ttl, timer=timer)

    def invalidate(self, user_id: str, event_id: str) -> None:
        self._cache.pop((user_id, event_id), None)

    def _run(
        self,
        operation: str,
        func: Callable[..., Any],
        *args: Any,
        event_id: Optional[str] = None,
        item_id: Optional[str] = None,
        read: bool = False,
    ) -> Result:
        try:
            return Result.success(func(*args))
        except ChecklistError as e:
            logger.warning(
                "Checklist %s rejected (event=%s item=%s): %s",
                operation, event_id, item_id, e.message,
            )
            return Result.fail(e)
        except Exception as e:
            logger.exception(
                "Checklist %s failed (event=%s item=%s)",
                operation, event_id, item_id,
            )
            if read:
                return Result.fail(ChecklistFetchError(event_id or "", str(e)))
            return Result.fail(ChecklistWriteError(operation, str(e)))

    # -------------------------------------------------------------------------
    # Operations (raise ChecklistError; wrapped by the public methods below)
    # -------------------------------------------------------------------------

    def _list(self, user_id: str, event_id: str) -> list[ChecklistItem]:
        key = (user_id, event_id)
        if key not in self._cache:
            self._cache[key] = self._repository.list_items(user_id, event_id)
        return list(self._cache[key])

    def _get(self, user_id: str, item_id: str) -> ChecklistItem:
        item = self._repository.get_item(user_id, item_id)
        if item is None:
            raise ChecklistItemNotFoundError(item_id)
        return item

    def _add(self, user_id: str, event_id: str, phase: ChecklistPhase, text: str) -> ChecklistItem:
        text = _clean_text(text)
        last = self._repository.max_position(user_id, event_id, phase)
        row = {
            "event_id": event_id,
            "user_id": user_id,
            "phase": phase.value,
            "text": text,
            "completed": False,
            "position": 0 if last is None else last + 1,
        }
        inserted = self._repository.insert_items([row])
        self.invalidate(user_id, event_id)
        if not inserted:
            raise ChecklistWriteError("add", "no row returned")
        return inserted[0]

    def _update(
        self,
        user_id: str,
        item_id: str,
        text: Optional[str],
        completed: Optional[bool],
    ) -> ChecklistItem:
        fields: dict[str, Any] = {}
        if text is not None:
            fields["text"] = _clean_text(text)
        if completed is not None:
            fields["completed"] = completed
        if not fields:
            raise ChecklistValidationError("Nothing to update", details={"item_id": item_id})

        item = self._repository.update_item(user_id, item_id, fields)
        if item is None:
            raise ChecklistItemNotFoundError(item_id)
        self.invalidate(user_id, item.event_id)
        return item

    def _toggle(self, user_id: str, item_id: str) -> ChecklistItem:
        current = self._get(user_id, item_id)
        item = self._repository.update_item(
            user_id, item_id, {"completed": not current.completed}
        )
        if item is None:
            raise ChecklistItemNotFoundError(item_id)
        self.invalidate(user_id, item.event_id)
        return item

    def _remove(self, user_id: str, item_id: str) -> bool:
        deleted = self._repository.delete_item(user_id, item_id)
        if deleted is None:
            raise ChecklistItemNotFoundError(item_id)
        self.invalidate(user_id, deleted.event_id)
        return True

    def _remove_all(self, user_id: str, event_id: str) -> int:
        try:
            return self._repository.delete_for_event(user_id, event_id)
        finally:
            self.invalidate(user_id, event_id)

    def _reorder(
        self,
        user_id: str,
        event_id: str,
        phase: ChecklistPhase,
        ordered_ids: list[str],
    ) -> list[ChecklistItem]:
        current = self._repository.list_items(user_id, event_id, phase)
        current_ids = {item.id for item in current}
        requested_ids = set(ordered_ids)
        duplicates = sorted({i for i in ordered_ids if ordered_ids.count(i) > 1})

        if duplicates or requested_ids != current_ids:
            raise ReorderMismatchError(
                event_id,
                phase.value,
                missing=sorted(current_ids - requested_ids),
                unexpected=sorted(requested_ids - current_ids) + duplicates,
            )

        by_id = {item.id: item for item in current}
        try:
            return self._write_positions(user_id, [by_id[item_id] for item_id in ordered_ids])
        finally:
            self.invalidate(user_id, event_id)

    def _write_positions(self, user_id: str, ordered: list[ChecklistItem]) -> list[ChecklistItem]:
        """Set position = index for each item, writing only the ones that change."""
        written: list[ChecklistItem] = []
        for index, item in enumerate(ordered):
            if item.position != index:
                updated = self._repository.update_item(user_id, item.id, {"position": index})
                if updated is None:
                    raise ChecklistItemNotFoundError(item.id)
                item = updated
            written.append(item)
        return written

    def _move(self, user_id: str, item_id: str, direction: MoveDirection) -> bool:
        item = self._get(user_id, item_id)
        siblings = self._repository.list_items(user_id, item.event_id, item.phase)
        index = next(i for i, sibling in enumerate(siblings) if sibling.id == item.id)
        target = index - 1 if direction == MoveDirection.UP else index + 1
        if target < 0 or target >= len(siblings):
            raise InvalidMoveError(item_id, direction.value)

        neighbour = siblings[target]
        try:
            if neighbour.position == item.position:
                # Tied positions cannot be swapped; renumber the phase instead
                siblings[index], siblings[target] = neighbour, item
                self._write_positions(user_id, siblings)
            else:
                self._repository.update_item(user_id, item.id, {"position": neighbour.position})
                self._repository.update_item(user_id, neighbour.id, {"position": item.position})
        finally:
            self.invalidate(user_id, item.event_id)
        return True

    def _apply_bulk(
        self,
        user_id: str,
        event_id: str,
        drafts: list[ChecklistItemDraft],
    ) -> list[ChecklistItem]:
        if not drafts:
            raise ChecklistValidationError("At least one item is required")

        positions = _next_positions(self._repository.list_items(user_id, event_id))
        rows = []
        for draft in drafts:
            phase = ChecklistPhase(draft.phase)
            rows.append({
                "event_id": event_id,
                "user_id": user_id,
                "phase": phase.value,
                "text": _clean_text(draft.text),
                "completed": False,
                "position": positions[phase],
            })
            positions[phase] += 1

        inserted = self._repository.insert_items(rows)
        self.invalidate(user_id, event_id)
        return inserted

    def _apply_template(
        self,
        user_id: str,
        event_id: str,
        template_id: str,
        mode: CopyMode,
    ) -> list[ChecklistItem]:
        template = get_template(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)

        if mode == CopyMode.REPLACE:
            self._remove_all(user_id, event_id)
        return self._apply_bulk(user_id, event_id, template.items)

    def _copy_checklist(
        self,
        user_id: str,
        event_id: str,
        source_event_id: str,
        mode: CopyMode,
    ) -> list[ChecklistItem]:
        source_items = self._list(user_id, source_event_id)
        if not source_items:
            raise EmptySourceChecklistError(source_event_id)

        drafts = [ChecklistItemDraft(phase=item.phase, text=item.text) for item in source_items]
        if mode == CopyMode.REPLACE:
            self._remove_all(user_id, event_id)
        return self._apply_bulk(user_id, event_id, drafts)

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    async def list_items(self, user_id: str, event_id: str) -> Result:
        return self._run("list", self._list, user_id, event_id, event_id=event_id, read=True)

    async def add_item(
        self, user_id: str, event_id: str, phase: ChecklistPhase, text: str
    ) -> Result:
        return self._run("add", self._add, user_id, event_id, phase, text, event_id=event_id)

    async def update_item(
        self,
        user_id: str,
        item_id: str,
        text: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> Result:
        return self._run("update", self._update, user_id, item_id, text, completed, item_id=item_id)

    async def toggle_item(self, user_id: str, item_id: str) -> Result:
        return self._run("toggle", self._toggle, user_id, item_id, item_id=item_id)

    async def remove_item(self, user_id: str, item_id: str) -> Result:
        return self._run("remove", self._remove, user_id, item_id, item_id=item_id)

    async def remove_all(self, user_id: str, event_id: str) -> Result:
        return self._run("remove_all", self._remove_all, user_id, event_id, event_id=event_id)

    async def reorder(
        self,
        user_id: str,
        event_id: str,
        phase: ChecklistPhase,
        ordered_ids: list[str],
    ) -> Result:
        return self._run(
            "reorder", self._reorder, user_id, event_id, phase, ordered_ids,
            event_id=event_id,
        )

    async def move_item(self, user_id: str, item_id: str, direction: MoveDirection) -> Result:
        return self._run("move", self._move, user_id, item_id, direction, item_id=item_id)

    async def copy_from(self, user_id: str, source_event_id: str) -> Result:
        return self._run(
            "copy_from", self._list, user_id, source_event_id,
            event_id=source_event_id, read=True,
        )

    async def apply_bulk(
        self, user_id: str, event_id: str, items: list[ChecklistItemDraft]
    ) -> Result:
        return self._run("apply_bulk", self._apply_bulk, user_id, event_id, items, event_id=event_id)

    async def apply_template(
        self, user_id: str, event_id: str, template_id: str, mode: CopyMode
    ) -> Result:
        return self._run(
            "apply_template", self._apply_template, user_id, event_id, template_id, mode,
            event_id=event_id,
        )

    async def copy_checklist(
        self, user_id: str, event_id: str, source_event_id: str, mode: CopyMode
    ) -> Result:
        return self._run(
            "copy_checklist", self._copy_checklist, user_id, event_id, source_event_id, mode,
            event_id=event_id,
        )
