import dataclasses
import unittest

from eitherpy import (
    Either, Left, Right,
    left, right, is_left, is_right,
    map, map_left, chain, pipe, fold,
    from_nullable, get_or_else,
)


class Counter:
    def __init__(self, f):
        self.f = f
        self.calls = 0

    def __call__(self, x):
        self.calls += 1
        return self.f(x)


class TestEitherCore(unittest.TestCase):
    def test_constructors_and_predicates(self):
        r = right(1)
        self.assertTrue(is_right(r))
        self.assertFalse(is_left(r))
        l = left("e")
        self.assertTrue(is_left(l))
        self.assertFalse(is_right(l))
        self.assertEqual(r.tag, "Right")
        self.assertEqual(l.tag, "Left")

    def test_structural_equality(self):
        self.assertEqual(right(1), Right(1))
        self.assertEqual(left("e"), Left("e"))
        self.assertNotEqual(left(1), right(1))
        self.assertEqual(len({right(1), Right(1), left(1)}), 2)

    def test_variants_are_frozen(self):
        r = right(1)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            r.value = 2  # type: ignore[misc]

    def test_variants_share_no_base(self):
        self.assertFalse(issubclass(Left, Right))
        self.assertFalse(issubclass(Right, Left))

    def test_predicates_on_foreign_values(self):
        self.assertFalse(is_left({"_tag": "Left", "value": 1}))  # type: ignore[arg-type]
        self.assertFalse(is_right(None))  # type: ignore[arg-type]

    def test_match_is_exhaustive(self):
        def describe(e: Either[str, int]) -> str:
            match e:
                case Left(value=err):
                    return f"L:{err}"
                case Right(value=v):
                    return f"R:{v}"
        self.assertEqual(describe(left("x")), "L:x")
        self.assertEqual(describe(right(3)), "R:3")


class TestMap(unittest.TestCase):
    def test_map_right(self):
        self.assertEqual(map(right(2), lambda x: x * 3), right(6))

    def test_map_left_passes_through_same_object(self):
        l = left("e")
        f = Counter(lambda x: x + 1)
        self.assertIs(map(l, f), l)
        self.assertEqual(f.calls, 0)

    def test_map_does_not_capture_faults(self):
        def boom(_):
            raise ValueError("boom")
        with self.assertRaises(ValueError):
            map(right(1), boom)

    def test_functor_identity(self):
        for e in (right(5), left("e")):
            self.assertEqual(map(e, lambda x: x), e)

    def test_functor_composition(self):
        f = lambda x: x + 1
        g = lambda x: x * 10
        for e in (right(5), left("e")):
            self.assertEqual(map(map(e, f), g), map(e, lambda x: g(f(x))))

    def test_map_left_transforms_error_only(self):
        self.assertEqual(map_left(left("e"), str.upper), left("E"))
        r = right(1)
        self.assertIs(map_left(r, str.upper), r)


class TestChain(unittest.TestCase):
    @staticmethod
    def half(x: int) -> Either[str, int]:
        return right(x // 2) if x % 2 == 0 else left(f"odd:{x}")

    def test_left_identity(self):
        self.assertEqual(chain(right(8), self.half), self.half(8))
        self.assertEqual(chain(right(3), self.half), self.half(3))

    def test_right_identity(self):
        for e in (right(4), left("e")):
            self.assertEqual(chain(e, right), e)

    def test_left_short_circuits(self):
        l = left("first")
        f = Counter(self.half)
        out = chain(l, f)
        self.assertEqual(f.calls, 0)
        self.assertIs(out, l)
        self.assertEqual(out.value, "first")


class TestPipe(unittest.TestCase):
    def test_pipe_runs_all_steps(self):
        out = pipe(right(1), lambda x: right(x + 1), lambda x: right(x * 10))
        self.assertEqual(out, right(20))

    def test_pipe_without_steps(self):
        self.assertEqual(pipe(right(1)), right(1))

    def test_pipe_equals_nested_chain(self):
        f = lambda x: right(x + 1)
        g = lambda x: right(x * 2)
        h = lambda x: left("big") if x > 5 else right(x)
        for start in (right(1), right(3), left("e")):
            self.assertEqual(pipe(start, f, g, h), chain(chain(chain(start, f), g), h))

    def test_steps_after_left_are_not_invoked(self):
        f1 = Counter(lambda _: left("f1 failed"))
        f2 = Counter(lambda x: right(x))
        f3 = Counter(lambda x: right(x))
        out = pipe(right(0), f1, f2, f3)
        self.assertEqual(out, left("f1 failed"))
        self.assertEqual((f1.calls, f2.calls, f3.calls), (1, 0, 0))

    def test_initial_left_skips_everything(self):
        f = Counter(lambda x: right(x))
        self.assertEqual(pipe(left("e"), f, f), left("e"))
        self.assertEqual(f.calls, 0)


class TestFold(unittest.TestCase):
    def test_fold_runs_exactly_one_handler(self):
        on_left = Counter(lambda e: f"L:{e}")
        on_right = Counter(lambda a: f"R:{a}")
        self.assertEqual(fold(left("x"), on_left, on_right), "L:x")
        self.assertEqual((on_left.calls, on_right.calls), (1, 0))
        self.assertEqual(fold(right(5), on_left, on_right), "R:5")
        self.assertEqual((on_left.calls, on_right.calls), (1, 1))


class TestNullableAndDefault(unittest.TestCase):
    def test_from_nullable(self):
        self.assertEqual(from_nullable(None, "missing"), left("missing"))
        self.assertEqual(from_nullable(7, "missing"), right(7))

    def test_from_nullable_keeps_falsy_values(self):
        for v in (0, "", [], False):
            self.assertEqual(from_nullable(v, "missing"), right(v))

    def test_get_or_else(self):
        self.assertEqual(get_or_else(left("e"), 0), 0)
        self.assertEqual(get_or_else(right(9), 0), 9)


class TestMisuse(unittest.TestCase):
    def test_combinators_reject_non_either(self):
        bogus = {"_tag": "Right", "value": 1}
        with self.assertRaises(TypeError) as cm:
            map(bogus, lambda x: x)  # type: ignore[arg-type]
        self.assertIn("expected Either", str(cm.exception))
        with self.assertRaises(TypeError):
            map_left(bogus, lambda x: x)  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            chain(None, right)  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            fold(42, str, str)  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            get_or_else("x", 0)  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            pipe(bogus, right)  # type: ignore[arg-type]
