"""
Decorator logging how long an awaited call took:

    @async_timer("payment_api_client.post_form", logger=logger)
    async def post_form(...):
        ...

logs "Timer: payment_api_client.post_form took 0.412093 s" once the call
returns or raises.
"""

import functools
import logging
import time


def async_timer(name: str, logger: logging.Logger):
    def decorator(function):
        @functools.wraps(function)
        async def wrapper(*args, **kwargs):
            started_at = time.monotonic()
            try:
                return await function(*args, **kwargs)
            finally:
                logger.info("Timer: %s took %f s", name, time.monotonic() - started_at)

        return wrapper

    return decorator
