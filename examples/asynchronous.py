"""
TaskEither: wrap a flaky async fetch, then fold or validate the result.

Run: python examples/asynchronous.py
"""
import asyncio
import json
import random

from eitherpy import Either, fold, left, pipe, right, try_catch, try_catch_async


async def fetch_data() -> str:
    await asyncio.sleep(0.1)
    if random.random() > 0.5:
        return '{"name": "Alice", "age": 30}'
    raise ConnectionError("Failed to fetch data")


def parse_json(s: str) -> Either[str, object]:
    return try_catch(lambda: json.loads(s), lambda ex: f"Invalid JSON: {ex}")


def validate_user(data: object) -> Either[str, dict]:
    if isinstance(data, dict) and "name" in data and "age" in data:
        return right(data)
    return left("Invalid user data")


async def main():
    fetched = await try_catch_async(fetch_data, lambda ex: f"Async error: {ex}")
    print(fold(
        fetched,
        lambda err: f"Async operation error: {err}",
        lambda data: f"Async operation success: {data}",
    ))

    # Await first; the rest of the pipeline is synchronous
    user_data = await try_catch_async(fetch_data, lambda ex: f"Error fetching user data: {ex}")
    user = pipe(user_data, parse_json, validate_user)
    print(fold(
        user,
        lambda err: f"Error fetching User: {err}",
        lambda u: f"User validated: {u['name']}, Age: {u['age']}",
    ))


if __name__ == "__main__":
    asyncio.run(main())
