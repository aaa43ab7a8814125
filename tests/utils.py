import asyncio


def run(coro):
    """Drive a service coroutine to completion."""
    return asyncio.run(coro)
