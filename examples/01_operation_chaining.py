from __future__ import annotations

from _infra import banner

from asyncchain import Callback, chain, fmap, lift as L, sequence
from kungfu import Error, Ok, Result


def count(callback: Callback[int, Exception]) -> None:
    callback(Ok(4))


def describe(arg: int, callback: Callback[str, Exception]) -> None:
    callback(Ok(f"Result: {arg}"))


def decorate(arg: str, callback: Callback[str, Exception]) -> None:
    callback(Ok(f"🍒 {arg} 🍒"))


def legacy_count(completion) -> None:
    # Old (result, error) callback style.
    completion(4, None)


def show(outcome: Result[str, Exception]) -> None:
    match outcome:
        case Ok(value):
            print(value)
        case Error(err):
            print(f"error: {err!r}")


def main() -> None:
    banner("01_operation_chaining: sequence + fmap + chain()")

    # Plain combinators
    sequence(sequence(count, describe), decorate)(show)
    sequence(fmap(count, lambda n: str(n // 2)), decorate)(show)

    # Same pipelines, fluent
    chain(count).then(describe).then(decorate).run(show)
    chain(count).map(lambda n: n // 2).map(str).then(decorate).run(show)

    # Legacy completion handlers join the chain through lift
    chain(L.from_handler(legacy_count)).then(describe).run(show)

    # Errors short-circuit
    chain(L.fail(ValueError("no count"))).then(describe).then(decorate).run(show)


if __name__ == "__main__":
    main()
