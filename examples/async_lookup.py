"""
Async combinators: chaining over an in-flight Either without intermediate awaits.

Run: python examples/async_lookup.py
"""
import asyncio

from tinyfp import ConsoleLogger, Either, Left, Pending, Right


async def fetch_details(product: str) -> Either[str, dict]:
    await asyncio.sleep(0.01)
    if not product:
        return Left("empty product name")
    return Right({"name": product, "stock": len(product)})


async def main():
    logger = ConsoleLogger("details")
    for product in ("keyboard", ""):
        summary = await (
            Pending(fetch_details(product))
            .tee(lambda d: logger.info("fetched", product=d["name"]))
            .map(lambda d: d["stock"])
            .bind(lambda n: Right(n) if n > 3 else Left("low stock"))
            .match(lambda e: f"unavailable: {e}", lambda n: f"in stock: {n}")
        )
        print(repr(product), "=>", summary)


if __name__ == "__main__":
    asyncio.run(main())
