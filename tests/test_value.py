from __future__ import annotations

import pytest

from lazyvals import CyclicEvaluationError, Delegated, Eager, EagerVal, Memo, Trans, Val, Value

pytestmark = pytest.mark.unit


def test_val_lifts_its_computation() -> None:
    assert Val(lambda: 10).lift == 10
    assert Val(lambda: "hello").lift == "hello"


def test_val_is_lazy_and_evaluates_once(call_log) -> None:
    value = Val(call_log.wrap(lambda: [1]))

    assert call_log.count == 0
    assert value.evaluated is False

    first = value.lift
    assert value.lift is first
    assert value.lift is first
    assert call_log.count == 1
    assert value.evaluated is True


def test_calling_a_value_reads_lift(call_log) -> None:
    value = Val(call_log.wrap(lambda: 5))

    assert value() == 5
    assert value.lift == 5
    assert call_log.count == 1


def test_none_result_is_cached(call_log) -> None:
    value = Val(call_log.wrap(lambda: None))

    assert value.lift is None
    assert value.lift is None
    assert call_log.count == 1


def test_val_propagates_errors_and_stays_pending(call_log, boom) -> None:
    value = Val(call_log.wrap(boom))

    with pytest.raises(ValueError, match="boom"):
        _ = value.lift
    with pytest.raises(ValueError, match="boom"):
        _ = value.lift

    assert value.evaluated is False
    assert call_log.count == 2


def test_eager_val_holds_literal() -> None:
    assert EagerVal(range(1, 11)).lift == range(1, 11)


def test_eager_forces_evaluation_at_construction(call_log) -> None:
    lazy = Val(call_log.wrap(lambda: 5))
    assert call_log.count == 0

    eager = Eager(lazy)
    assert call_log.count == 1

    assert eager.lift == 5
    assert eager.lift == 5
    assert call_log.count == 1


def test_eager_raises_from_constructor(boom) -> None:
    with pytest.raises(ValueError):
        Eager(Val(boom))


def test_base_value_has_no_payload() -> None:
    with pytest.raises(NotImplementedError):
        _ = Value().lift


def test_delegated_forwards_lift(call_log) -> None:
    inner = Val(call_log.wrap(lambda: 3))
    outer = Delegated(inner)

    assert outer.lift == 3
    assert outer.lift == 3
    assert call_log.count == 1


def test_self_referencing_value_is_rejected() -> None:
    holder: list[Value[int]] = []
    cyclic = Val(lambda: holder[0].lift + 1)
    holder.append(cyclic)

    with pytest.raises(CyclicEvaluationError):
        _ = cyclic.lift


def test_shared_upstream_is_evaluated_once(call_log) -> None:
    ten = Val(call_log.wrap(lambda: 10))
    doubled = Trans(ten, lambda x: 2 * x)
    tripled = Trans(ten, lambda x: 3 * x)

    assert doubled.lift == 20
    assert tripled.lift == 30
    assert call_log.count == 1


def test_repr_shows_evaluation_state() -> None:
    value = Val(lambda: 7)
    assert repr(value) == "Val(<pending>)"
    _ = value.lift
    assert repr(value) == "Val(7)"


def test_memo_caches_through_kungfu_lazy(call_log) -> None:
    cell = Memo(call_log.wrap(lambda: "cached"))

    assert cell.evaluated is False
    assert cell.get() == "cached"
    assert cell.get() == "cached"
    assert cell.evaluated is True
    assert call_log.count == 1


def test_memo_retries_after_failure() -> None:
    attempts: list[int] = []

    def flaky() -> int:
        attempts.append(1)
        if len(attempts) == 1:
            raise OSError("flaky")
        return len(attempts)

    cell = Memo(flaky)

    with pytest.raises(OSError):
        cell.get()
    assert cell.evaluated is False
    assert cell.get() == 2
    assert cell.get() == 2
    assert len(attempts) == 2
