import pytest

_executed = []


def test_plain_test_body_executes():
    _executed.append("sync")


@pytest.mark.asyncio
def test_marked_sync_test_body_executes():
    _executed.append("marked-sync")


@pytest.mark.asyncio
async def test_async_test_body_executes():
    _executed.append("async")


def test_every_body_above_ran():
    assert _executed == ["sync", "marked-sync", "async"]
