from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from plumbing import RetryPolicy, branch, pipe, retry, whilst


@dataclass(slots=True)
class Failure(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(slots=True)
class FlakyBackend:
    failures_before_ok: int = 2

    async def fetch_user(self, user_id: int) -> dict[str, object]:
        await asyncio.sleep(0.01)
        if self.failures_before_ok > 0:
            self.failures_before_ok -= 1
            raise Failure("api: unavailable")
        return {"id": user_id, "name": f"user:{user_id}"}


async def main() -> None:
    api = FlakyBackend()

    user = await retry(
        RetryPolicy.exponential(times=3, initial=0.01),
        lambda: api.fetch_user(42),
    )
    print("retry:", user)

    greet = pipe(lambda u: u["name"], lambda name: f"hello, {name}")
    print("pipe:", await greet(user))

    summary = branch(lambda u: u["id"], lambda u: len(u["name"]))
    print("branch:", await summary(user))

    pages = await whilst(lambda seen: len(seen) < 3, lambda seen: f"page-{len(seen)}")
    print("whilst:", pages)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(main())
