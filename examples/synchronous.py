"""
Synchronous Either: parse JSON, divide safely, validate a user with pipe.

Run: python examples/synchronous.py
"""
import json

from eitherpy import Either, chain, fold, left, pipe, right, try_catch


def parse_json(s: str) -> Either[str, object]:
    return try_catch(lambda: json.loads(s), lambda ex: f"Invalid JSON: {ex}")


def safe_divide(numerator: float, denominator: float) -> Either[str, float]:
    if denominator == 0:
        return left("Cannot divide by zero")
    return right(numerator / denominator)


def validate_user(data: object) -> Either[str, dict]:
    if isinstance(data, dict) and "name" in data and "age" in data:
        return right(data)
    return left("Invalid user data")


def update_user_age(user: dict) -> Either[str, dict]:
    return right({**user, "age": user["age"] + 1})


def main():
    json_str = '{"name": "Alice", "age": 30}'

    # try_catch around json.loads
    print(fold(
        parse_json(json_str),
        lambda err: f"Error parsing JSON: {err}",
        lambda data: f"Parsed object: {json.dumps(data)}",
    ))

    # 10 / 2 / 0.5
    division = chain(safe_divide(10, 2), lambda r: safe_divide(r, 0.5))
    print(fold(division, lambda err: f"Error during division: {err}", lambda v: f"Division result: {v}"))

    # parse -> validate -> bump age
    user = pipe(parse_json(json_str), validate_user, update_user_age)
    print(fold(user, lambda err: f"Final error: {err}", lambda u: f"User validated: {u['name']}, Age: {u['age']}"))

    broken = pipe(parse_json("not json"), validate_user, update_user_age)
    print(fold(broken, lambda err: f"Final error: {err}", lambda u: f"User validated: {u['name']}"))


if __name__ == "__main__":
    main()
