"""Tests for the checklist store."""

import itertools
import logging
from typing import Any, Optional

import pytest

from modules.checklists.exceptions import (
    ChecklistFetchError,
    ChecklistItemNotFoundError,
    ChecklistValidationError,
    ChecklistWriteError,
    EmptySourceChecklistError,
    InvalidMoveError,
    ReorderMismatchError,
    TemplateNotFoundError,
)
from modules.checklists.models import (
    ChecklistItem,
    ChecklistItemDraft,
    ChecklistPhase,
    CopyMode,
    MoveDirection,
)
from modules.checklists.service import ChecklistItemStore
from modules.checklists.templates import get_template

USER = "user-1"
OTHER_USER = "user-2"
PRE = ChecklistPhase.PRE
DURING = ChecklistPhase.DURING
POST = ChecklistPhase.POST


class InMemoryChecklistRepository:
    """Stand-in for ChecklistItemRepository backed by a dict."""

    def __init__(self):
        self.rows: dict[str, ChecklistItem] = {}
        self._ids = itertools.count(1)
        self.list_calls = 0
        self.writes = 0
        self.fail_reads: Optional[Exception] = None
        self.fail_writes: Optional[Exception] = None

    def _read(self):
        if self.fail_reads:
            raise self.fail_reads

    def _write(self):
        if self.fail_writes:
            raise self.fail_writes
        self.writes += 1

    def list_items(self, user_id, event_id, phase=None):
        self._read()
        self.list_calls += 1
        items = [
            item for item in self.rows.values()
            if item.user_id == user_id
            and item.event_id == event_id
            and (phase is None or item.phase == phase)
        ]
        return sorted(items, key=lambda item: item.position)

    def get_item(self, user_id, item_id):
        self._read()
        item = self.rows.get(item_id)
        return item if item and item.user_id == user_id else None

    def max_position(self, user_id, event_id, phase):
        self._read()
        positions = [
            item.position for item in self.rows.values()
            if item.user_id == user_id and item.event_id == event_id and item.phase == phase
        ]
        return max(positions) if positions else None

    def insert_items(self, rows: list[dict[str, Any]]):
        self._write()
        inserted = []
        for row in rows:
            item = ChecklistItem(id=f"item-{next(self._ids)}", **row)
            self.rows[item.id] = item
            inserted.append(item)
        return inserted

    def update_item(self, user_id, item_id, fields):
        self._write()
        item = self.get_item(user_id, item_id)
        if item is None:
            return None
        updated = item.model_copy(update=fields)
        self.rows[item_id] = updated
        return updated

    def delete_item(self, user_id, item_id):
        self._write()
        item = self.get_item(user_id, item_id)
        if item is None:
            return None
        return self.rows.pop(item_id)

    def delete_for_event(self, user_id, event_id):
        self._write()
        doomed = [i.id for i in self.rows.values() if i.user_id == user_id and i.event_id == event_id]
        for item_id in doomed:
            del self.rows[item_id]
        return len(doomed)


@pytest.fixture
def repository():
    return InMemoryChecklistRepository()


@pytest.fixture
def store(repository):
    return ChecklistItemStore(repository)


async def add(store, text, phase=PRE, event_id="e1", user_id=USER) -> ChecklistItem:
    result = await store.add_item(user_id, event_id, phase, text)
    assert result.ok, result.error
    return result.value


async def listed(store, event_id="e1", user_id=USER) -> list[ChecklistItem]:
    result = await store.list_items(user_id, event_id)
    assert result.ok, result.error
    return result.value


class TestAdd:
    @pytest.mark.asyncio
    async def test_positions_per_phase(self, store):
        confirm = await add(store, "Confirm venue", PRE)
        pack = await add(store, "Pack props", PRE)
        setup = await add(store, "Setup booth", DURING)

        assert confirm.position == 0
        assert pack.position == 1
        assert setup.position == 0
        assert confirm.completed is False

    @pytest.mark.asyncio
    async def test_n_adds_give_distinct_positions(self, store):
        items = [await add(store, f"Task {n}") for n in range(6)]
        assert [item.position for item in items] == [0, 1, 2, 3, 4, 5]

    @pytest.mark.asyncio
    async def test_appends_after_gap(self, store):
        await add(store, "a")
        b = await add(store, "b")
        await add(store, "c")
        await store.remove_item(USER, b.id)

        d = await add(store, "d")
        assert d.position == 3

    @pytest.mark.asyncio
    async def test_events_are_independent(self, store):
        await add(store, "a", event_id="e1")
        other = await add(store, "b", event_id="e2")
        assert other.position == 0

    @pytest.mark.asyncio
    async def test_text_is_trimmed(self, store):
        item = await add(store, "  Confirm venue  ")
        assert item.text == "Confirm venue"

    @pytest.mark.asyncio
    async def test_blank_text_rejected(self, store, repository):
        result = await store.add_item(USER, "e1", PRE, "   ")
        assert not result.ok
        assert isinstance(result.error, ChecklistValidationError)
        assert repository.rows == {}

    @pytest.mark.asyncio
    async def test_write_failure_becomes_error(self, store, repository, caplog):
        repository.fail_writes = RuntimeError("connection reset")
        with caplog.at_level(logging.ERROR):
            result = await store.add_item(USER, "e1", PRE, "Confirm venue")

        assert not result.ok
        assert isinstance(result.error, ChecklistWriteError)
        assert result.error.status_code == 502
        assert "Checklist add failed" in caplog.text


class TestList:
    @pytest.mark.asyncio
    async def test_ordered_by_position(self, store):
        await add(store, "pre 0", PRE)
        await add(store, "during 0", DURING)
        await add(store, "pre 1", PRE)

        items = await listed(store)
        assert [item.position for item in items] == [0, 0, 1]

    @pytest.mark.asyncio
    async def test_tenant_scoped(self, store):
        await add(store, "mine")
        assert await listed(store, user_id=OTHER_USER) == []

    @pytest.mark.asyncio
    async def test_cached_until_mutation(self, store, repository):
        await add(store, "a")
        await listed(store)
        await listed(store)
        assert repository.list_calls == 1

        await add(store, "b")
        items = await listed(store)
        assert repository.list_calls == 2
        assert [item.text for item in items] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_fetch_failure(self, store, repository):
        repository.fail_reads = ConnectionError("timeout")
        result = await store.list_items(USER, "e1")
        assert not result.ok
        assert isinstance(result.error, ChecklistFetchError)
        assert result.error.details["event_id"] == "e1"

    @pytest.mark.asyncio
    async def test_failure_result_unwrap_raises(self, store, repository):
        repository.fail_reads = ConnectionError("timeout")
        result = await store.list_items(USER, "e1")
        with pytest.raises(ChecklistFetchError):
            result.unwrap()


class TestUpdate:
    @pytest.mark.asyncio
    async def test_partial_text_update(self, store):
        await add(store, "a")
        item = await add(store, "b")

        result = await store.update_item(USER, item.id, text="B")

        assert result.ok
        assert result.value.text == "B"
        assert result.value.position == 1
        assert result.value.completed is False

    @pytest.mark.asyncio
    async def test_completed_update(self, store):
        item = await add(store, "a")
        result = await store.update_item(USER, item.id, completed=True)
        assert result.value.completed is True
        assert result.value.text == "a"

    @pytest.mark.asyncio
    async def test_empty_update_rejected(self, store):
        item = await add(store, "a")
        result = await store.update_item(USER, item.id)
        assert isinstance(result.error, ChecklistValidationError)

    @pytest.mark.asyncio
    async def test_missing_item(self, store):
        result = await store.update_item(USER, "nope", text="x")
        assert isinstance(result.error, ChecklistItemNotFoundError)
        assert result.error.status_code == 404

    @pytest.mark.asyncio
    async def test_other_users_item(self, store):
        item = await add(store, "a")
        result = await store.update_item(OTHER_USER, item.id, text="x")
        assert isinstance(result.error, ChecklistItemNotFoundError)

    @pytest.mark.asyncio
    async def test_invalidates_cache(self, store):
        item = await add(store, "a")
        await listed(store)
        await store.update_item(USER, item.id, text="changed")
        assert (await listed(store))[0].text == "changed"


class TestToggle:
    @pytest.mark.asyncio
    async def test_toggle_flips(self, store):
        item = await add(store, "a")

        first = await store.toggle_item(USER, item.id)
        second = await store.toggle_item(USER, item.id)

        assert first.value.completed is True
        assert second.value.completed is False
        assert second.value.position == item.position

    @pytest.mark.asyncio
    async def test_toggle_missing(self, store):
        result = await store.toggle_item(USER, "nope")
        assert isinstance(result.error, ChecklistItemNotFoundError)


class TestRemove:
    @pytest.mark.asyncio
    async def test_siblings_keep_positions(self, store):
        a = await add(store, "a")
        b = await add(store, "b")
        c = await add(store, "c")

        result = await store.remove_item(USER, b.id)

        assert result.ok and result.value is True
        positions = {item.id: item.position for item in await listed(store)}
        assert positions == {a.id: 0, c.id: 2}

    @pytest.mark.asyncio
    async def test_remove_missing(self, store):
        result = await store.remove_item(USER, "nope")
        assert isinstance(result.error, ChecklistItemNotFoundError)

    @pytest.mark.asyncio
    async def test_remove_all(self, store):
        await add(store, "a")
        await add(store, "b", DURING)
        await add(store, "other event", event_id="e2")
        await listed(store)

        result = await store.remove_all(USER, "e1")

        assert result.value == 2
        assert await listed(store) == []
        assert len(await listed(store, event_id="e2")) == 1

    @pytest.mark.asyncio
    async def test_remove_all_empty_event(self, store):
        result = await store.remove_all(USER, "e1")
        assert result.ok
        assert result.value == 0


class TestReorder:
    @pytest.mark.asyncio
    async def test_permutation_reads_back_in_order(self, store):
        a = await add(store, "a")
        b = await add(store, "b")
        c = await add(store, "c")
        await listed(store)

        result = await store.reorder(USER, "e1", PRE, [c.id, a.id, b.id])

        assert result.ok
        assert [item.id for item in result.value] == [c.id, a.id, b.id]
        assert [item.position for item in result.value] == [0, 1, 2]
        assert [item.id for item in await listed(store)] == [c.id, a.id, b.id]

    @pytest.mark.asyncio
    async def test_closes_gaps(self, store):
        a = await add(store, "a")
        b = await add(store, "b")
        c = await add(store, "c")
        await store.remove_item(USER, b.id)

        result = await store.reorder(USER, "e1", PRE, [a.id, c.id])
        assert [item.position for item in result.value] == [0, 1]

    @pytest.mark.asyncio
    async def test_other_phases_untouched(self, store):
        a = await add(store, "a")
        b = await add(store, "b")
        during = await add(store, "during", DURING)

        await store.reorder(USER, "e1", PRE, [b.id, a.id])

        items = {item.id: item for item in await listed(store)}
        assert items[during.id].position == 0

    @pytest.mark.asyncio
    async def test_missing_id_rejected(self, store, repository):
        a = await add(store, "a")
        b = await add(store, "b")
        writes = repository.writes

        result = await store.reorder(USER, "e1", PRE, [b.id])

        assert isinstance(result.error, ReorderMismatchError)
        assert result.error.details["missing"] == [a.id]
        assert result.error.status_code == 422
        assert repository.writes == writes

    @pytest.mark.asyncio
    async def test_unknown_id_rejected(self, store):
        a = await add(store, "a")
        result = await store.reorder(USER, "e1", PRE, [a.id, "stranger"])
        assert isinstance(result.error, ReorderMismatchError)
        assert result.error.details["unexpected"] == ["stranger"]

    @pytest.mark.asyncio
    async def test_duplicate_id_rejected(self, store):
        a = await add(store, "a")
        b = await add(store, "b")
        result = await store.reorder(USER, "e1", PRE, [a.id, b.id, a.id])
        assert isinstance(result.error, ReorderMismatchError)
        assert result.error.details["unexpected"] == [a.id]

    @pytest.mark.asyncio
    async def test_item_from_other_phase_rejected(self, store):
        a = await add(store, "a")
        during = await add(store, "during", DURING)
        result = await store.reorder(USER, "e1", PRE, [during.id, a.id])
        assert isinstance(result.error, ReorderMismatchError)


class TestMove:
    @pytest.mark.asyncio
    async def test_move_up_swaps_with_previous(self, store):
        a = await add(store, "a")
        b = await add(store, "b")
        await listed(store)

        result = await store.move_item(USER, b.id, MoveDirection.UP)

        assert result.ok
        assert [item.id for item in await listed(store)] == [b.id, a.id]

    @pytest.mark.asyncio
    async def test_move_down_across_gap(self, store):
        a = await add(store, "a")
        b = await add(store, "b")
        c = await add(store, "c")
        await store.remove_item(USER, b.id)

        await store.move_item(USER, a.id, MoveDirection.DOWN)

        positions = {item.id: item.position for item in await listed(store)}
        assert positions == {c.id: 0, a.id: 2}

    @pytest.mark.asyncio
    async def test_cannot_move_past_ends(self, store):
        a = await add(store, "a")
        b = await add(store, "b")

        up = await store.move_item(USER, a.id, MoveDirection.UP)
        down = await store.move_item(USER, b.id, MoveDirection.DOWN)

        assert isinstance(up.error, InvalidMoveError)
        assert isinstance(down.error, InvalidMoveError)

    @pytest.mark.asyncio
    async def test_move_stays_within_phase(self, store):
        await add(store, "pre", PRE)
        during = await add(store, "during", DURING)
        result = await store.move_item(USER, during.id, MoveDirection.UP)
        assert isinstance(result.error, InvalidMoveError)


class TestBulk:
    @pytest.mark.asyncio
    async def test_positions_continue_within_batch(self, store):
        await add(store, "existing pre", PRE)

        result = await store.apply_bulk(USER, "e1", [
            ChecklistItemDraft(phase=PRE, text="p1"),
            ChecklistItemDraft(phase=DURING, text="d1"),
            ChecklistItemDraft(phase=PRE, text="p2"),
            ChecklistItemDraft(phase=POST, text="x1"),
        ])

        assert result.ok
        assert [(item.text, item.position) for item in result.value] == [
            ("p1", 1), ("d1", 0), ("p2", 2), ("x1", 0),
        ]

    @pytest.mark.asyncio
    async def test_single_insert(self, store, repository):
        await store.apply_bulk(USER, "e1", [
            ChecklistItemDraft(phase=PRE, text="p1"),
            ChecklistItemDraft(phase=PRE, text="p2"),
        ])
        assert repository.writes == 1

    @pytest.mark.asyncio
    async def test_empty_batch_rejected(self, store):
        result = await store.apply_bulk(USER, "e1", [])
        assert isinstance(result.error, ChecklistValidationError)


class TestTemplates:
    @pytest.mark.asyncio
    async def test_apply_template_appends(self, store):
        await add(store, "mine")
        template = get_template("geral")

        result = await store.apply_template(USER, "e1", "geral", CopyMode.ADD)

        assert len(result.value) == len(template.items)
        assert len(await listed(store)) == len(template.items) + 1
        first_pre = next(item for item in result.value if item.phase == PRE)
        assert first_pre.text == "Confirmar data, horário e local"
        assert first_pre.position == 1

    @pytest.mark.asyncio
    async def test_apply_template_replaces(self, store):
        await add(store, "mine")
        template = get_template("totem")

        result = await store.apply_template(USER, "e1", "totem", CopyMode.REPLACE)

        items = await listed(store)
        assert len(items) == len(template.items)
        assert "mine" not in {item.text for item in items}
        assert result.value[0].position == 0

    @pytest.mark.asyncio
    async def test_unknown_template_deletes_nothing(self, store):
        await add(store, "mine")
        result = await store.apply_template(USER, "e1", "festa-junina", CopyMode.REPLACE)
        assert isinstance(result.error, TemplateNotFoundError)
        assert len(await listed(store)) == 1


class TestCopy:
    @pytest.mark.asyncio
    async def test_copy_from_reads_source(self, store, repository):
        await add(store, "s1", event_id="source")
        await add(store, "s2", DURING, event_id="source")
        writes = repository.writes

        result = await store.copy_from(USER, "source")

        assert [item.text for item in result.value] == ["s1", "s2"]
        assert repository.writes == writes

    @pytest.mark.asyncio
    async def test_copy_checklist_add(self, store):
        await add(store, "s1", event_id="source")
        await add(store, "s2", event_id="source")
        await add(store, "mine", event_id="target")

        result = await store.copy_checklist(USER, "target", "source", CopyMode.ADD)

        assert [(i.text, i.position) for i in result.value] == [("s1", 1), ("s2", 2)]
        assert len(await listed(store, event_id="target")) == 3
        assert len(await listed(store, event_id="source")) == 2

    @pytest.mark.asyncio
    async def test_copy_checklist_replace(self, store):
        await add(store, "s1", event_id="source")
        await add(store, "mine", event_id="target")

        await store.copy_checklist(USER, "target", "source", CopyMode.REPLACE)

        items = await listed(store, event_id="target")
        assert [(i.text, i.position, i.completed) for i in items] == [("s1", 0, False)]

    @pytest.mark.asyncio
    async def test_copy_resets_completion(self, store):
        source_item = await add(store, "s1", event_id="source")
        await store.toggle_item(USER, source_item.id)

        result = await store.copy_checklist(USER, "target", "source", CopyMode.ADD)
        assert result.value[0].completed is False

    @pytest.mark.asyncio
    async def test_empty_source_fails_before_delete(self, store):
        await add(store, "mine", event_id="target")

        result = await store.copy_checklist(USER, "target", "empty", CopyMode.REPLACE)

        assert isinstance(result.error, EmptySourceChecklistError)
        assert [i.text for i in await listed(store, event_id="target")] == ["mine"]


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class TestCacheBounds:
    @pytest.mark.asyncio
    async def test_least_recently_used_event_evicted(self, repository):
        store = ChecklistItemStore(repository, cache_size=2)

        for event_id in ("e1", "e2", "e3"):
            await store.list_items(USER, event_id)
        assert repository.list_calls == 3
        assert len(store._cache) == 2

        await store.list_items(USER, "e3")
        assert repository.list_calls == 3
        await store.list_items(USER, "e1")
        assert repository.list_calls == 4

    @pytest.mark.asyncio
    async def test_many_events_stay_bounded(self, repository):
        store = ChecklistItemStore(repository, cache_size=16)
        for n in range(200):
            await store.list_items(USER, f"event-{n}")
        assert len(store._cache) == 16

    @pytest.mark.asyncio
    async def test_entries_expire(self, repository):
        clock = FakeClock()
        store = ChecklistItemStore(repository, cache_ttl=30, timer=clock)
        await store.add_item(USER, "e1", PRE, "a")

        await store.list_items(USER, "e1")
        clock.now = 29
        await store.list_items(USER, "e1")
        assert repository.list_calls == 1

        # Row written by another process
        repository.rows["outside"] = ChecklistItem(
            id="outside", event_id="e1", user_id=USER, phase=PRE, text="b", position=1,
        )
        clock.now = 31
        result = await store.list_items(USER, "e1")
        assert repository.list_calls == 2
        assert [item.text for item in result.value] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_invalidate_drops_entry(self, store, repository):
        await store.list_items(USER, "e1")
        store.invalidate(USER, "e1")
        store.invalidate(USER, "never-listed")
        await store.list_items(USER, "e1")
        assert repository.list_calls == 2


class TestMoveWithTiedPositions:
    def tie(self, repository, *texts):
        items = []
        for text in texts:
            item = ChecklistItem(
                id=f"tied-{text}", event_id="e1", user_id=USER, phase=PRE, text=text, position=0,
            )
            repository.rows[item.id] = item
            items.append(item)
        return items

    @pytest.mark.asyncio
    async def test_move_up_renumbers_phase(self, store, repository):
        a, b = self.tie(repository, "a", "b")

        result = await store.move_item(USER, b.id, MoveDirection.UP)

        assert result.ok
        items = await listed(store)
        assert [(item.id, item.position) for item in items] == [(b.id, 0), (a.id, 1)]

    @pytest.mark.asyncio
    async def test_move_down_renumbers_phase(self, store, repository):
        a, b, c = self.tie(repository, "a", "b", "c")

        await store.move_item(USER, a.id, MoveDirection.DOWN)

        items = await listed(store)
        assert [item.id for item in items] == [b.id, a.id, c.id]
        assert [item.position for item in items] == [0, 1, 2]
