from unittest.mock import MagicMock

import pytest

from paymentsessions.utils.timer import async_timer


async def test_logs_duration():
    logger = MagicMock()

    @async_timer("test.do_stuff", logger=logger)
    async def do_stuff(value):
        return value * 2

    assert await do_stuff(21) == 42
    logger.info.assert_called_once()
    args = logger.info.call_args[0]
    assert args[0] == "Timer: %s took %f s"
    assert args[1] == "test.do_stuff"
    assert args[2] >= 0


async def test_logs_duration_on_error():
    logger = MagicMock()

    @async_timer("test.fail", logger=logger)
    async def fail():
        raise ValueError("boom")

    with pytest.raises(ValueError):
        await fail()
    logger.info.assert_called_once()
