"""
Mixed async and sync steps: fetch, parse/validate with pipe, update, fold.

Run: python examples/mixed.py
"""
import asyncio
import json
import random

from eitherpy import (
    Either,
    configure_logging,
    fold,
    is_left,
    left,
    map,
    pipe,
    right,
    try_catch,
    try_catch_async,
)


async def fetch_data() -> str:
    await asyncio.sleep(0.1)
    if random.random() > 0.3:
        return '{"name": "Alice", "age": 30}'
    raise ConnectionError("Failed to fetch data")


async def update_user(user: dict, data: str) -> dict:
    await asyncio.sleep(0.05)
    if random.random() > 0.3:
        return {**user, "data": data}
    raise RuntimeError("Failed to update User")


def parse_json(s: str) -> Either[str, object]:
    return try_catch(lambda: json.loads(s), lambda ex: f"Invalid JSON: {ex}")


def validate_user(data: object) -> Either[str, dict]:
    if isinstance(data, dict) and "name" in data and "age" in data:
        return right(data)
    return left("Invalid user data")


async def main():
    # Show the adapters' fault records on stderr
    configure_logging("DEBUG", example="mixed")

    user_data = await try_catch_async(fetch_data, lambda ex: f"Error fetching user data: {ex}")
    parsed = pipe(user_data, parse_json, validate_user)

    # The update needs a real user, so stop here on Left
    if is_left(parsed):
        print(f"Pipeline error: {parsed.value}")
        return

    updated = await try_catch_async(
        lambda: update_user(parsed.value, "Some new User data"),
        lambda ex: f"Error updating user: {ex}",
    )
    message = map(updated, lambda u: f"Successfully updated User: {u['name']}")
    print(fold(message, lambda err: f"Error in User pipeline: {err}", lambda msg: msg))


if __name__ == "__main__":
    asyncio.run(main())
