"""
AnyIO example (optional): the same chains running on anyio's event loop.

This example requires `anyio` to be installed. If not available, it prints
an informative message and exits gracefully.

Run: python examples/anyio_chain.py
"""
try:
    import anyio
    HAVE_ANYIO = True
except ImportError:
    HAVE_ANYIO = False

from maybepy import Maybe


async def fetch_price(symbol: str):
    await anyio.sleep(0.01)
    return {"ACME": 12.5}.get(symbol)


async def quote(symbol: str, out: dict) -> None:
    out[symbol] = await Maybe.from_(symbol).map_async(fetch_price).or_else(0.0)


async def main():
    prices: dict = {}
    async with anyio.create_task_group() as tg:
        for s in ("ACME", "NOPE"):
            tg.start_soon(quote, s, prices)
    print("prices =>", prices)


if __name__ == "__main__":
    if HAVE_ANYIO:
        anyio.run(main)
    else:
        print("anyio is not installed; skipping AnyIO example.")
