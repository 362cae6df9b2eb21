"""
Noteboard Backend: Repository Tests
====================================

What:  The NoteRepository contract, checked against every implementation.
How:   The `repository` fixture is parametrized: each test runs once on the
       in-memory store and once on SQLAlchemy over a temporary SQLite file.
"""

import asyncio
import uuid
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio

from noteboard.repositories.base import issue_timestamp, next_update_time, parse_note_id
from noteboard.repositories.memory import InMemoryNoteRepository
from noteboard.repositories.sqlalchemy_repository import SqlAlchemyNoteRepository


@pytest_asyncio.fixture(params=["memory", "sqlite"])
async def repository(request, sqlite_database):
    if request.param == "memory":
        yield InMemoryNoteRepository()
        return
    async with sqlite_database.session() as session:
        yield SqlAlchemyNoteRepository(session)


class TestRepositoryContract:

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_timestamps(self, repository):
        note = await repository.create(title="Groceries", content="Milk, eggs", color="#10B981")

        assert uuid.UUID(note.id)
        assert note.title == "Groceries"
        assert note.content == "Milk, eggs"
        assert note.color == "#10B981"
        assert note.created_at == note.updated_at
        assert note.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_get_round_trip(self, repository):
        created = await repository.create(title="T", content="C", color="#3B82F6")

        fetched = await repository.get(created.id)

        assert fetched is not None
        assert fetched.id == created.id
        assert fetched.title == "T"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("note_id", ["000", "", str(uuid.uuid4())])
    async def test_missing_ids(self, repository, note_id):
        assert await repository.get(note_id) is None
        assert await repository.update(note_id, {"title": "X"}) is None
        assert await repository.delete(note_id) is False

    @pytest.mark.asyncio
    async def test_id_spellings_resolve_to_same_note(self, repository):
        created = await repository.create(title="T", content="C", color="#3B82F6")

        for spelling in (created.id.upper(), "{" + created.id + "}", "urn:uuid:" + created.id):
            fetched = await repository.get(spelling)
            assert fetched is not None
            assert fetched.id == created.id

        updated = await repository.update(created.id.upper(), {"title": "X"})
        assert updated.id == created.id
        assert await repository.delete("{" + created.id.upper() + "}") is True
        assert await repository.get(created.id) is None

    @pytest.mark.asyncio
    async def test_update_writes_only_given_fields(self, repository):
        created = await repository.create(title="T", content="C", color="#EF4444")

        updated = await repository.update(created.id, {"content": ""})

        assert updated.title == "T"
        assert updated.content == ""
        assert updated.color == "#EF4444"
        assert updated.updated_at > created.updated_at

        fetched = await repository.get(created.id)
        assert fetched.content == ""

    @pytest.mark.asyncio
    async def test_delete_removes_record(self, repository):
        created = await repository.create(title="T", content="C", color="#3B82F6")

        assert await repository.delete(created.id) is True
        assert await repository.get(created.id) is None
        assert await repository.list() == []

    @pytest.mark.asyncio
    async def test_list_orders_by_last_update(self, repository):
        ids = []
        for i in range(4):
            note = await repository.create(title=f"n{i}", content="c", color="#3B82F6")
            ids.append(note.id)
            await asyncio.sleep(0.002)

        await repository.update(ids[1], {"title": "touched"})

        notes = await repository.list()

        assert len(notes) == 4
        assert notes[0].id == ids[1]
        assert [n.id for n in notes[1:]] == [ids[3], ids[2], ids[0]]
        stamps = [n.updated_at for n in notes]
        assert stamps == sorted(stamps, reverse=True)


    @pytest.mark.asyncio
    async def test_back_to_back_creates_keep_newest_first(self, repository):
        ids = [
            (await repository.create(title=f"n{i}", content="c", color="#3B82F6")).id
            for i in range(6)
        ]

        notes = await repository.list()

        assert [n.id for n in notes] == list(reversed(ids))
        created = [n.created_at for n in reversed(notes)]
        assert all(earlier < later for earlier, later in zip(created, created[1:]))

class TestNextUpdateTime:

    def test_strictly_after_previous_even_if_clock_is_behind(self):
        future = datetime(2999, 1, 1, tzinfo=timezone.utc)

        result = next_update_time(future)

        assert result == future + timedelta(microseconds=1)

    def test_uses_current_time_when_previous_is_old(self):
        old = datetime(2000, 1, 1, tzinfo=timezone.utc)
        assert next_update_time(old).year > 2000

    def test_naive_previous_treated_as_utc(self):
        naive = datetime(2000, 1, 1, 12, 0, 0)
        assert next_update_time(naive).tzinfo is not None


class TestIssueTimestamp:

    def test_strictly_increasing(self):
        stamps = [issue_timestamp() for _ in range(50)]
        assert all(earlier < later for earlier, later in zip(stamps, stamps[1:]))


class TestParseNoteId:

    def test_canonical_form(self):
        raw = str(uuid.uuid4())
        assert str(parse_note_id(raw.upper())) == raw

    @pytest.mark.parametrize("note_id", ["000", "", "not-a-uuid"])
    def test_malformed_is_none(self, note_id):
        assert parse_note_id(note_id) is None
