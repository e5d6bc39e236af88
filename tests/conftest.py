"""
Shared fixtures: a controllable clock, a stub directory and wired adapters.
"""

import pytest
from datetime import datetime, timedelta, timezone
from uuid import UUID

from directory_auth.adapters import JWTTokenCodec, MemoryRevocationStore
from directory_auth.domain.credential import Credential, DirectoryRecord
from directory_auth.domain.errors import LoginFailure
from directory_auth.domain.outcome import DirectoryLookup
from directory_auth.ports.directory_port import DirectoryPort
from directory_auth.sdk.client import SessionClient

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"
ADMIN_ID = UUID("6f1c2a7e-3b4d-4e5f-8a9b-0c1d2e3f4a5b")


class FrozenClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class StubDirectory(DirectoryPort):
    """In-memory directory keyed by identifier."""

    def __init__(self):
        self.records = {}
        self.unreachable = False
        self.calls = []

    def add(self, identifier: str, record: DirectoryRecord) -> None:
        self.records[identifier] = record

    def verify(self, credential: Credential) -> DirectoryLookup:
        self.calls.append(credential.identifier)

        if self.unreachable:
            return DirectoryLookup.fail(LoginFailure.DIRECTORY_UNREACHABLE)

        record = self.records.get(credential.identifier)
        if record is None:
            return DirectoryLookup.fail(LoginFailure.CREDENTIAL_REJECTED)
        if not record.is_active:
            return DirectoryLookup.fail(LoginFailure.ACCOUNT_INACTIVE)
        return DirectoryLookup.found(record)


@pytest.fixture
def clock():
    """Clock frozen on a whole second."""
    return FrozenClock(datetime(2025, 3, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def secret():
    return TEST_SECRET


@pytest.fixture
def codec(clock, secret):
    return JWTTokenCodec(secret=secret, lifetime_minutes=60, clock=clock)


@pytest.fixture
def store(clock):
    return MemoryRevocationStore(clock=clock)


@pytest.fixture
def admin_record():
    return DirectoryRecord(
        user_id=ADMIN_ID,
        role=1,
        is_active=True,
        email="admin@x.cl",
        username="admin",
    )


@pytest.fixture
def directory(admin_record):
    stub = StubDirectory()
    stub.add("admin@x.cl", admin_record)
    stub.add("admin", admin_record)
    stub.add(
        "dormant",
        DirectoryRecord(
            user_id=UUID("00000000-0000-4000-8000-000000000002"),
            role=2,
            is_active=False,
            username="dormant",
        ),
    )
    return stub


@pytest.fixture
def session_client(directory, codec, store):
    return SessionClient(directory=directory, codec=codec, revocations=store)
