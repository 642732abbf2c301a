"""
Async chains: mixing sync and async steps and awaiting once at the end.

Run: python examples/async_chain.py
"""
import asyncio
from dataclasses import dataclass

from maybepy import Maybe, defer


@dataclass
class Human:
    age: int
    height: int = 183


async def load(human_id: int) -> Maybe[Human]:
    await asyncio.sleep(0.01)
    return Maybe.from_(Human(20) if human_id == 1 else None)


async def birthday(h: Human) -> Human:
    await asyncio.sleep(0.01)
    h.age += 10
    return h


async def stranger() -> Human:
    return Human(20)


async def main():
    h = Human(20)
    grown = await (
        Maybe.from_(h)
        .map_async(birthday)
        .with_(lambda x: setattr(x, "age", x.age + 10))
        .value_or_throw("Not valid int value")
    )
    print("grown =>", grown.age, "original =>", h.age)     # 40 40

    fallback = await (
        Maybe.from_(Human(20))
        .map_async(birthday)
        .check(lambda x: x.age > 100)
        .or_else_async(stranger)
    )
    print("fallback =>", fallback.age)                     # 20

    missing = await defer(load(2)).map(lambda x: x.age).or_else(-1)
    print("missing =>", missing)                           # -1


if __name__ == "__main__":
    asyncio.run(main())
