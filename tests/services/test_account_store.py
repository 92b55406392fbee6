"""Account Store — creation, lookup, uniqueness and timeouts.

Invariants:
    - Second create with the same email fails with DuplicateEmailError; first stays retrievable
    - Concurrent creates with one email: exactly one succeeds
    - The store never reads before writing (uniqueness belongs to the repository)
    - Unknown ids raise NotFoundError
"""

import asyncio

import pytest

from fincalc.core.errors import (
    BackendTimeoutError, DuplicateEmailError, NotFoundError, ValidationError,
)
from fincalc.services.account_store import AccountStore


async def test_create_assigns_id_and_timestamp(account_repo):
    store = AccountStore(account_repo)
    account = await store.create("ada@example.com", "s3cret")
    assert account.id == 1
    assert account.email == "ada@example.com"
    assert account.created_at is not None


async def test_ids_increase_monotonically(account_repo):
    store = AccountStore(account_repo)
    first = await store.create("a@example.com", "pw")
    second = await store.create("b@example.com", "pw")
    assert second.id > first.id


async def test_duplicate_email_rejected_and_first_account_kept(account_repo):
    store = AccountStore(account_repo)
    first = await store.create("dup@example.com", "one")
    with pytest.raises(DuplicateEmailError):
        await store.create("dup@example.com", "two")
    fetched = await store.get_by_id(first.id)
    assert fetched == first


async def test_create_does_not_precheck_existence(account_repo):
    store = AccountStore(account_repo)
    await store.create("x@example.com", "pw")
    assert account_repo.calls == ["insert"]


async def test_concurrent_creates_with_same_email_single_winner(account_repo):
    store = AccountStore(account_repo)
    results = await asyncio.gather(
        store.create("race@example.com", "a"),
        store.create("race@example.com", "b"),
        return_exceptions=True,
    )
    errors = [r for r in results if isinstance(r, Exception)]
    assert len(errors) == 1
    assert isinstance(errors[0], DuplicateEmailError)
    assert len(account_repo.rows) == 1


async def test_email_match_is_case_sensitive(account_repo):
    store = AccountStore(account_repo)
    await store.create("Case@example.com", "pw")
    other = await store.create("case@example.com", "pw")
    assert other.id == 2


@pytest.mark.parametrize("email,password", [
    ("", "pw"), ("a@example.com", ""), (None, "pw"), ("a@example.com", 123),
])
async def test_create_rejects_malformed_input(account_repo, email, password):
    store = AccountStore(account_repo)
    with pytest.raises(ValidationError):
        await store.create(email, password)
    assert account_repo.rows == {}


async def test_get_by_id_unknown_raises_not_found(account_repo):
    store = AccountStore(account_repo)
    with pytest.raises(NotFoundError) as exc_info:
        await store.get_by_id(999)
    assert exc_info.value.http_status == 404


async def test_get_by_id_beyond_64_bits_is_not_found_without_lookup(account_repo):
    with pytest.raises(NotFoundError):
        await AccountStore(account_repo).get_by_id(2 ** 63)
    assert account_repo.calls == []


async def test_get_by_id_rejects_non_integer_id(account_repo):
    with pytest.raises(ValidationError):
        await AccountStore(account_repo).get_by_id("1")


async def test_backend_timeout_surfaces_as_backend_timeout_error(slow_repo):
    store = AccountStore(slow_repo, timeout_seconds=0.01)
    with pytest.raises(BackendTimeoutError) as exc_info:
        await store.create("slow@example.com", "pw")
    assert exc_info.value.operation == "account.create"
