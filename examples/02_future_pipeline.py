from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from threading import Event

from _infra import User, banner, fake_client, setup_logging

from asyncchain import HttpFetcher, MemoryDatabase, load
from kungfu import Error, Ok, Result


def main() -> None:
    banner("02_future_pipeline: fetch -> decode -> save")
    setup_logging()

    database = MemoryDatabase()
    with fake_client() as client, ThreadPoolExecutor(max_workers=2) as executor:
        fetcher = HttpFetcher(client, executor=executor)

        for user_id in (1, 2, 404):
            done = Event()

            def show(outcome: Result[User, Exception], done: Event = done) -> None:
                match outcome:
                    case Ok(user):
                        print(f"loaded {user.name} ({user.avatar_image_url})")
                    case Error(err):
                        print(f"error: {err}")
                done.set()

            load(fetcher, f"/user/{user_id}", User, database=database).observe(show)
            done.wait(timeout=5)

    print(f"saved: {database.keys()}")


if __name__ == "__main__":
    main()
