import asyncio
import pytest
from unittest.mock import AsyncMock
from fastapi import status
from sqlalchemy.exc import OperationalError
from app.core.exceptions import InternalError, NotFoundError
from app.db.database import transaction


@pytest.mark.asyncio
async def test_transaction_commits_on_success(mock_db):
    async with transaction(mock_db):
        pass

    mock_db.commit.assert_awaited_once()
    mock_db.rollback.assert_not_awaited()


@pytest.mark.asyncio
async def test_transaction_rolls_back_on_http_error(mock_db):
    with pytest.raises(NotFoundError):
        async with transaction(mock_db):
            raise NotFoundError("livestream not found")

    mock_db.rollback.assert_awaited_once()
    mock_db.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_transaction_wraps_database_errors(mock_db):
    with pytest.raises(InternalError) as exc_info:
        async with transaction(mock_db):
            raise OperationalError("DELETE FROM livecomments", {}, Exception("lost connection"))

    assert exc_info.value.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    mock_db.rollback.assert_awaited_once()
    mock_db.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_transaction_rolls_back_when_commit_fails(mock_db):
    mock_db.commit = AsyncMock(side_effect=OperationalError("COMMIT", {}, Exception("deadlock")))

    with pytest.raises(InternalError):
        async with transaction(mock_db):
            pass

    mock_db.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_transaction_cancellation_skips_rollback(mock_db):
    with pytest.raises(asyncio.CancelledError):
        async with transaction(mock_db):
            raise asyncio.CancelledError()

    mock_db.rollback.assert_not_awaited()
    mock_db.commit.assert_not_awaited()
