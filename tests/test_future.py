import threading
from unittest.mock import Mock, call

import pytest
from kungfu import Error, Ok

from asyncchain import Future, Promise, PromiseSettledError
from support import Recorder, error_value, ok_value


class MyVal: pass

class MyError(Exception): pass


@pytest.fixture
def p():
    return Promise()


def test_observer_added_early(p, recorder):
    p.future.observe(recorder)
    assert recorder.outcomes == []
    p.resolve(MyVal)
    assert recorder.value is MyVal


def test_observer_added_late_runs_immediately(p, recorder):
    p.resolve(MyVal)
    p.future.observe(recorder)
    assert recorder.value is MyVal


def test_observers_run_in_registration_order(p):
    order = Mock()
    p.future.observe(order.first).observe(order.second).observe(order.third)
    p.resolve(1)
    assert [c[0] for c in order.mock_calls] == ["first", "second", "third"]
    assert len(order.mock_calls) == 3


def test_each_observer_called_exactly_once(p, mock):
    p.future.observe(mock.early)
    p.resolve(1)
    p.future.observe(mock.late)
    assert [name for name, _, _ in mock.mock_calls] == ["early", "late"]


def test_reject(p, recorder):
    e = MyError()
    p.future.observe(recorder)
    p.reject(e)
    assert recorder.error is e


def test_settled_twice(p):
    p.resolve(1)
    with pytest.raises(PromiseSettledError):
        p.resolve(2)
    with pytest.raises(PromiseSettledError):
        p.reject(MyError())
    assert ok_value(p.future.outcome) == 1


def test_pending_state(p):
    assert not p.future.is_settled
    assert p.future.outcome is None
    p.reject(MyError())
    assert p.future.is_settled


def test_observer_error_does_not_starve_others(p, recorder):
    broken = Mock(side_effect=Exception("observer failed"))
    p.future.observe(broken).observe(recorder)
    p.resolve(1)
    assert broken.call_count == 1
    assert recorder.value == 1


def test_promise_is_not_a_future(p):
    assert not isinstance(p, Future)
    assert not hasattr(p.future, "resolve")


def test_preresolved():
    recorder = Recorder()
    Future.resolved(5).observe(recorder)
    assert recorder.value == 5


def test_chained_success(p, recorder):
    inner = Promise()
    result = p.future.chained(lambda v: inner.future)
    result.observe(recorder)
    p.resolve(1)
    assert recorder.outcomes == []
    inner.resolve("two")
    assert recorder.value == "two"


def test_chained_inner_rejects(p, recorder):
    e = MyError()
    p.future.chained(lambda v: Future.rejected(e)).observe(recorder)
    p.resolve(1)
    assert recorder.error is e


def test_chained_on_rejected_future_skips_closure(mock):
    e = MyError()
    recorder = Recorder()
    Future.rejected(e).chained(mock.closure).observe(recorder)
    assert recorder.error is e
    assert mock.mock_calls == []


def test_chained_closure_raises(p, recorder):
    e = MyError()

    def closure(value):
        raise e

    p.future.chained(closure).observe(recorder)
    p.resolve(1)
    assert recorder.error is e


def test_chained_passes_value(p, mock):
    mock.closure.return_value = Future.resolved("x")
    p.future.chained(mock.closure)
    p.resolve(41)
    assert mock.mock_calls == [call.closure(41)]


def test_transformed(p, recorder):
    p.future.transformed(lambda n: n // 2).transformed(str).observe(recorder)
    p.resolve(4)
    assert recorder.value == "2"


def test_transformed_raise_becomes_failure(recorder):
    e = MyError()

    def explode(value):
        raise e

    Future.resolved(1).transformed(explode).observe(recorder)
    assert recorder.error is e


def test_transformed_error_passes_through(mock):
    e = MyError()
    recorder = Recorder()
    Future.rejected(e).transformed(mock.transform).observe(recorder)
    assert recorder.error is e
    assert mock.mock_calls == []


def test_chained_cherry_scenario(recorder):
    def op2(n):
        return Future.resolved(f"Result: {n}")

    def op3(s):
        return Future.resolved(f"🍒 {s} 🍒")

    Future.resolved(4).chained(op2).chained(op3).observe(recorder)
    assert recorder.value == "🍒 Result: 4 🍒"


def test_chaining_grouping_is_irrelevant():
    def op2(n):
        return Future.resolved(n + 1)

    def op3(n):
        return Future.resolved(n * 10)

    left, right = Recorder(), Recorder()
    Future.resolved(1).chained(op2).chained(op3).observe(left)
    Future.resolved(1).chained(lambda n: op2(n).chained(op3)).observe(right)
    assert ok_value(left.only) == ok_value(right.only) == 20


def test_to_operation(p, recorder):
    operation = p.future.to_operation()
    operation(recorder)
    p.reject(MyError())
    assert isinstance(recorder.error, MyError)


def test_concurrent_observe_and_resolve_delivers_once():
    rounds = 50
    for _ in range(rounds):
        p = Promise()
        counts = []
        lock = threading.Lock()
        start = threading.Barrier(5)

        def observer(outcome):
            with lock:
                counts.append(ok_value(outcome))

        def register():
            start.wait()
            for _ in range(20):
                p.future.observe(observer)

        def resolve():
            start.wait()
            p.resolve("v")

        threads = [threading.Thread(target=register) for _ in range(4)]
        threads.append(threading.Thread(target=resolve))
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert counts == ["v"] * 80


def test_rejected_outcome_is_error():
    e = MyError()
    outcome = Future.rejected(e).outcome
    assert error_value(outcome) is e
    match outcome:
        case Ok(_):
            raise AssertionError("rejected future must not hold Ok")
        case Error(_):
            pass


def test_chained_closure_returning_non_future_rejects(p, recorder):
    p.future.chained(lambda v: v * 2).observe(recorder)
    p.resolve(1)
    assert isinstance(recorder.error, AttributeError)


def test_long_transformed_chain_on_pending_future(p, recorder):
    links = 2000
    future = p.future
    for _ in range(links):
        future = future.transformed(lambda n: n + 1)
    future.observe(recorder)
    p.resolve(0)
    assert recorder.value == links


def test_long_chained_chain_of_pending_promises(recorder):
    links = 2000
    promises = [Promise() for _ in range(links)]
    future = Future.resolved(0)
    for promise in promises:
        future = future.chained(lambda n, promise=promise: promise.future.transformed(lambda m: m + n))
    future.observe(recorder)
    for promise in promises:
        promise.resolve(1)
    assert recorder.value == links


def test_resolve_inside_observer_settles_before_outer_resolve_returns(p, recorder):
    inner = Promise()
    inner.future.observe(recorder)
    p.future.observe(lambda outcome: inner.resolve(ok_value(outcome) + 1))
    p.resolve(1)
    assert recorder.value == 2


def test_long_chain_error_propagates(p, recorder, mock):
    e = MyError()
    future = p.future
    for _ in range(2000):
        future = future.transformed(mock.transform)
    future.observe(recorder)
    p.reject(e)
    assert recorder.error is e
    assert mock.mock_calls == []
