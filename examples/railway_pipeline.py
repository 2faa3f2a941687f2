"""
Railway-style validation: map/bind/tee over Either, finishing with match.

Run: python examples/railway_pipeline.py
"""
from tinyfp import ConsoleLogger, Either, Left, Right, from_nullable, log_left, log_value, fold

CATALOG = {"lamp": 40, "desk": 250, "chair": 0}


def find_price(name: str) -> Either[str, int]:
    return from_nullable(CATALOG.get(name)).to_either(f"unknown product {name!r}")


def ensure_priced(price: int) -> Either[str, int]:
    return Right(price) if price > 0 else Left("product has no price")


def main():
    logger = ConsoleLogger("catalog", level="DEBUG")
    totals = []
    for name in ("lamp", "desk", "chair", "sofa"):
        line = (
            find_price(name)
            .bind(ensure_priced)
            .map(lambda p: round(p * 1.2, 2))
            .tee(log_value(logger, f"priced {name}"))
            .tee_left(log_left(logger, f"skipped {name}"))
            .match(lambda e: 0, lambda p: p)
        )
        totals.append(line)
    print("total =>", fold(totals, 0, lambda s, t: s + t))  # 348.0


if __name__ == "__main__":
    main()
