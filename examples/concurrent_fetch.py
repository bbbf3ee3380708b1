"""
Concurrent TaskEithers: start two fetches together, process each, then run a
dependent update.

Coroutines only start when awaited, so both fetches are scheduled with
asyncio.create_task before either is awaited.

Run: python examples/concurrent_fetch.py
"""
import asyncio
import json
import random

from eitherpy import (
    Either,
    fold,
    is_left,
    left,
    map_left,
    pipe,
    right,
    try_catch,
    try_catch_async,
)


async def fetch_user_data() -> str:
    await asyncio.sleep(0.1)
    if random.random() > 0.3:
        return '{"name": "Alice", "age": 30, "address": "123 Main St"}'
    raise ConnectionError("Failed to fetch User data")


async def fetch_membership_data() -> str:
    await asyncio.sleep(0.08)
    if random.random() > 0.3:
        return '"Premium"'
    raise ConnectionError("Failed to fetch membership data")


async def update_user(user: dict, membership: str) -> dict:
    await asyncio.sleep(0.05)
    if random.random() > 0.3:
        return {**user, "membership_level": membership}
    raise RuntimeError("Failed to update User")


def parse_json(s: str) -> Either[str, object]:
    return try_catch(lambda: json.loads(s), lambda ex: f"Invalid JSON: {ex}")


def validate_user(data: object) -> Either[str, dict]:
    if isinstance(data, dict) and "name" in data and "age" in data:
        return right(data)
    return left("Invalid User")


def validate_membership(data: object) -> Either[str, str]:
    if isinstance(data, str):
        return right(data)
    return left("Invalid membership data")


async def main():
    user_task = asyncio.create_task(
        try_catch_async(fetch_user_data, lambda ex: f"Error fetching User data: {ex}")
    )
    membership_task = asyncio.create_task(
        try_catch_async(fetch_membership_data, lambda ex: f"Error fetching membership data: {ex}")
    )

    user = map_left(
        pipe(await user_task, parse_json, validate_user),
        lambda err: f"Unable to process User: {err}",
    )
    if is_left(user):
        print(user.value)
        return

    membership = map_left(
        pipe(await membership_task, parse_json, validate_membership),
        lambda err: f"Unable to process membership data: {err}",
    )
    if is_left(membership):
        print(membership.value)
        return

    updated = await try_catch_async(
        lambda: update_user(user.value, membership.value),
        lambda ex: f"Error updating user: {ex}",
    )
    print(fold(
        updated,
        lambda err: f"Error updating User with membership data: {err}",
        lambda u: f"Successfully updated User with membership: {u['membership_level']}",
    ))


if __name__ == "__main__":
    asyncio.run(main())
