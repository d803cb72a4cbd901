import time

import pytest

from dockman.util.helpers import (
    assert_no_error,
    delayed,
    hash_string,
    map_slice,
    wait_for,
)


def test_hash_string_empty_is_known_digest():
    assert hash_string("") == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_hash_string_is_deterministic_hex():
    first = hash_string("dockman")
    assert first == hash_string("dockman")
    assert len(first) == 64
    assert all(c in "0123456789abcdef" for c in first)
    assert first != hash_string("dockman ")


def test_map_slice_passes_index():
    result = map_slice(["a", "b", "c"], lambda item, index: f"{index}:{item}")
    assert result == ["0:a", "1:b", "2:c"]


def test_map_slice_empty():
    assert map_slice([], lambda item, index: item) == []


def test_wait_for_succeeds_when_predicate_turns_true():
    calls = []

    def predicate():
        calls.append(1)
        return len(calls) >= 3

    assert wait_for(2.0, 0.01, predicate) is True
    assert len(calls) == 3


def test_wait_for_times_out():
    assert wait_for(0.05, 0.01, lambda: False) is False


def test_wait_for_does_not_check_before_first_interval():
    calls = []

    def predicate():
        calls.append(1)
        return True

    assert wait_for(0.05, 1.0, predicate) is False
    assert calls == []


def test_wait_for_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        wait_for(1.0, 0, lambda: True)


def test_delayed_waits_at_least_delay():
    started = time.monotonic()
    result = delayed(0.1, lambda: "done")
    elapsed = time.monotonic() - started
    assert result == "done"
    assert elapsed >= 0.1


def test_delayed_adds_nothing_when_func_is_slow():
    def slow():
        time.sleep(0.1)
        return 7

    started = time.monotonic()
    result = delayed(0.01, slow)
    elapsed = time.monotonic() - started
    assert result == 7
    assert elapsed < 0.5


def test_assert_no_error():
    assert assert_no_error(None) is None
    with pytest.raises(ValueError, match="boom"):
        assert_no_error(ValueError("boom"))