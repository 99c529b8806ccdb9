"""Unit tests for ProfileService."""

import asyncio
from dataclasses import replace
from typing import Any

import pytest

from core.exceptions import (
    BackendError,
    ErrorCode,
    ProfileRaceUnresolvedError,
    StoreErrorCode,
    ValidationError,
)
from domain.entities.profile import DEFAULT_PROFILE_NAME, Profile, ProfileRole
from domain.services.profile_service import ProfileService
from tests.unit.conftest import FakeUnitOfWork


def _unique_violation() -> BackendError:
    return BackendError(
        'duplicate key value violates unique constraint "profiles_pkey"',
        store_code=StoreErrorCode.UNIQUE_VIOLATION.value,
    )


@pytest.fixture
def service(uow: FakeUnitOfWork) -> ProfileService:
    return ProfileService(lambda: uow)


@pytest.fixture
def insert_echoes(uow: FakeUnitOfWork) -> None:
    """Make profiles.create return the inserted profile."""

    async def _create(profile: Profile) -> Profile:
        return profile

    uow.profiles.create.side_effect = _create


# --- fast path ---


class TestExistingProfile:
    @pytest.mark.asyncio
    async def test_returns_existing_without_writing(
        self, service: ProfileService, uow: FakeUnitOfWork
    ):
        existing = Profile(id="user-1", name="Jane", role=ProfileRole.ADMIN)
        uow.profiles.get.return_value = existing

        result = await service.ensure("user-1", email="other@example.com", name="Ignored")

        assert result is existing
        uow.profiles.get.assert_called_once_with("user-1")
        uow.profiles.create.assert_not_called()
        assert not uow.committed


# --- creation ---


class TestCreate:
    @pytest.mark.asyncio
    async def test_creates_customer_profile(
        self, service: ProfileService, uow: FakeUnitOfWork, insert_echoes: None
    ):
        uow.profiles.get.return_value = None

        result = await service.ensure("user-1", name="Jane Doe")

        assert result.id == "user-1"
        assert result.name == "Jane Doe"
        assert result.role == ProfileRole.CUSTOMER
        assert result.created_at == result.updated_at
        uow.profiles.create.assert_called_once()
        assert uow.committed

    @pytest.mark.asyncio
    async def test_name_from_email_local_part(
        self, service: ProfileService, uow: FakeUnitOfWork, insert_echoes: None
    ):
        uow.profiles.get.return_value = None

        result = await service.ensure("user-1", email="a.b@example.com")

        assert result.name == "a.b"

    @pytest.mark.asyncio
    async def test_explicit_name_wins_over_email(
        self, service: ProfileService, uow: FakeUnitOfWork, insert_echoes: None
    ):
        uow.profiles.get.return_value = None

        result = await service.ensure("user-1", email="a.b@example.com", name="Alice")

        assert result.name == "Alice"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", [None, "", "@example.com"])
    async def test_fallback_name(
        self,
        service: ProfileService,
        uow: FakeUnitOfWork,
        insert_echoes: None,
        email: str | None,
    ):
        uow.profiles.get.return_value = None

        result = await service.ensure("user-1", email=email)

        assert result.name == DEFAULT_PROFILE_NAME == "User"


# --- validation ---


class TestMissingId:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("profile_id", ["", None])
    async def test_rejects_before_store_access(self, profile_id: str | None):
        opened: list[FakeUnitOfWork] = []

        def factory() -> FakeUnitOfWork:
            uow = FakeUnitOfWork()
            opened.append(uow)
            return uow

        service = ProfileService(factory)

        with pytest.raises(ValidationError) as exc_info:
            await service.ensure(profile_id)

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Missing user id"
        assert opened == []


# --- store failures ---


class TestInsertFailures:
    @pytest.mark.asyncio
    async def test_unique_violation_rereads_once(
        self, service: ProfileService, uow: FakeUnitOfWork
    ):
        winner = Profile(id="user-1", name="winner")
        uow.profiles.get.side_effect = [None, winner]
        uow.profiles.create.side_effect = _unique_violation()

        result = await service.ensure("user-1", name="loser")

        assert result is winner
        assert uow.profiles.get.call_count == 2
        uow.profiles.create.assert_called_once()
        assert uow.rolled_back
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_other_store_error_propagates_without_reread(
        self, service: ProfileService, uow: FakeUnitOfWork
    ):
        uow.profiles.get.return_value = None
        uow.profiles.create.side_effect = BackendError(
            'null value in column "name" violates not-null constraint',
            store_code="23502",
            details={"detail": "Failing row contains (user-1, null)."},
        )

        with pytest.raises(BackendError) as exc_info:
            await service.ensure("user-1")

        assert exc_info.value.message == 'null value in column "name" violates not-null constraint'
        assert exc_info.value.details == {"detail": "Failing row contains (user-1, null)."}
        assert exc_info.value.status_code == 500
        uow.profiles.get.assert_called_once()

    @pytest.mark.asyncio
    async def test_connection_error_without_code_propagates(
        self, service: ProfileService, uow: FakeUnitOfWork
    ):
        uow.profiles.get.return_value = None
        uow.profiles.create.side_effect = BackendError("connection reset by peer")

        with pytest.raises(BackendError, match="connection reset"):
            await service.ensure("user-1")

        uow.profiles.get.assert_called_once()

    @pytest.mark.asyncio
    async def test_reread_miss_is_reported_not_retried(
        self, service: ProfileService, uow: FakeUnitOfWork
    ):
        uow.profiles.get.side_effect = [None, None]
        uow.profiles.create.side_effect = _unique_violation()

        with pytest.raises(ProfileRaceUnresolvedError) as exc_info:
            await service.ensure("user-1")

        assert exc_info.value.error_code == ErrorCode.PROFILE_RACE_UNRESOLVED
        assert uow.profiles.get.call_count == 2
        uow.profiles.create.assert_called_once()


# --- concurrency ---


class _SharedTable:
    """In-memory profiles table with a primary key on ``id``."""

    def __init__(self) -> None:
        self.rows: dict[str, Profile] = {}
        self.inserts = 0


class _RacingProfileRepository:
    def __init__(self, table: _SharedTable, barrier: asyncio.Barrier) -> None:
        self._table = table
        self._barrier = barrier
        self._missed = False

    async def get(self, id: str) -> Profile | None:
        row = self._table.rows.get(id)
        if row is None and not self._missed:
            # Hold every caller until all of them have observed the miss
            self._missed = True
            await self._barrier.wait()
        return replace(row) if row else None

    async def create(self, profile: Profile) -> Profile:
        await asyncio.sleep(0)
        if profile.id in self._table.rows:
            raise _unique_violation()
        self._table.rows[profile.id] = replace(profile)
        self._table.inserts += 1
        return replace(profile)


class _RacingUnitOfWork:
    def __init__(self, table: _SharedTable, barrier: asyncio.Barrier) -> None:
        self.profiles = _RacingProfileRepository(table, barrier)

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass

    async def __aenter__(self) -> "_RacingUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


class TestConcurrentCallers:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("callers", [2, 5])
    async def test_exactly_one_insert_and_identical_results(self, callers: int):
        table = _SharedTable()
        barrier = asyncio.Barrier(callers)
        service = ProfileService(lambda: _RacingUnitOfWork(table, barrier))

        results = await asyncio.gather(
            *(service.ensure("user-1", email=f"caller{i}@example.com") for i in range(callers))
        )

        assert table.inserts == 1
        assert len(table.rows) == 1
        assert all(result == results[0] for result in results)
        assert results[0] == table.rows["user-1"]

    @pytest.mark.asyncio
    async def test_sequential_calls_are_idempotent(self):
        table = _SharedTable()
        barrier = asyncio.Barrier(1)
        service = ProfileService(lambda: _RacingUnitOfWork(table, barrier))

        first = await service.ensure("user-1", name="First")
        again = [await service.ensure("user-1", name=f"Other {i}") for i in range(3)]

        assert table.inserts == 1
        assert all(profile == first for profile in again)
        assert first.name == "First"
