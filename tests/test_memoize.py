import pytest

from pyselectx import ConfigurationError, deep_equality_check, default_memoize


def test_repeated_arguments_call_function_once():
    calls = []

    def add(a, b):
        calls.append((a, b))
        return a + b

    memoized = default_memoize(add)
    assert memoized(1, 2) == 3
    assert memoized(1, 2) == 3
    assert calls == [(1, 2)]


def test_changed_argument_recomputes():
    calls = []
    memoized = default_memoize(lambda a, b: calls.append((a, b)) or len(calls))

    memoized(1, 2)
    memoized(1, 3)
    assert calls == [(1, 2), (1, 3)]


def test_only_the_last_call_is_remembered():
    calls = []
    memoized = default_memoize(lambda x: calls.append(x) or x)

    memoized("a")
    memoized("b")
    memoized("a")
    assert calls == ["a", "b", "a"]


def test_different_arity_recomputes():
    calls = []
    memoized = default_memoize(lambda *args: calls.append(args) or len(args))

    assert memoized(1) == 1
    assert memoized(1, 2) == 2
    assert len(calls) == 2


def test_first_call_always_computes():
    calls = []
    memoized = default_memoize(lambda: calls.append(1))

    memoized()
    memoized()
    assert calls == [1]


def test_default_check_uses_identity():
    calls = []
    memoized = default_memoize(lambda d: calls.append(d) or d["v"])

    memoized({"v": 1})
    memoized({"v": 1})
    assert len(calls) == 2


def test_custom_equality_check():
    calls = []
    memoized = default_memoize(lambda d: calls.append(d) or d["v"], deep_equality_check)

    assert memoized({"v": 1}) == 1
    assert memoized({"v": 1}) == 1
    assert len(calls) == 1


def test_last_args_updated_on_cache_hit():
    seen = []

    def check(a, b):
        seen.append((a, b))
        return True

    memoized = default_memoize(lambda x: x, check)
    memoized("first")
    memoized("second")
    memoized("third")
    assert seen == [("first", "second"), ("second", "third")]


def test_clear_cache_forces_recompute():
    calls = []
    memoized = default_memoize(lambda x: calls.append(x) or x)

    memoized(1)
    memoized.clear_cache()
    memoized(1)
    assert calls == [1, 1]


def test_each_memoizer_has_its_own_slot():
    calls = []

    def double(x):
        calls.append(x)
        return x * 2

    first = default_memoize(double)
    second = default_memoize(double)
    first(1)
    second(1)
    assert calls == [1, 1]


def test_errors_propagate_and_leave_cache_untouched():
    state = {"fail": False}

    def compute(x):
        if state["fail"]:
            raise ValueError("bad input")
        return x

    memoized = default_memoize(compute)
    assert memoized(1) == 1

    state["fail"] = True
    with pytest.raises(ValueError, match="bad input"):
        memoized(2)
    assert memoized(1) == 1


def test_wraps_function_metadata():
    def area(width, height):
        """Compute an area."""
        return width * height

    memoized = default_memoize(area)
    assert memoized.__name__ == "area"
    assert memoized.__doc__ == "Compute an area."


def test_non_callable_equality_check_is_rejected():
    with pytest.raises(ConfigurationError, match="equality_check must be callable"):
        default_memoize(lambda x: x, "not a function")
