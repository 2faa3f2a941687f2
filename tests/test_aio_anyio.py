import unittest

from tinyfp import Left, Right, Pending, map_async

try:
    import anyio
except ImportError:  # pragma: no cover - anyio is a test extra
    anyio = None  # type: ignore


async def lookup(name):
    await anyio.sleep(0)
    return Right(len(name)) if name else Left("empty name")


@unittest.skipIf(anyio is None, "anyio not installed")
class TestAnyIOBackend(unittest.TestCase):
    def test_pipeline_runs_under_anyio(self):
        async def main():
            return await Pending(lookup("abc")).map(lambda x: x * 2).match(lambda e: -1, lambda x: x)

        self.assertEqual(anyio.run(main), 6)

    def test_cancel_scope_stops_continuation(self):
        calls = []

        async def main():
            never = anyio.Event()

            async def slow():
                await never.wait()
                return Right(1)

            with anyio.move_on_after(0.01) as scope:
                await map_async(slow(), calls.append)
            return scope.cancelled_caught

        self.assertTrue(anyio.run(main))
        self.assertEqual(calls, [])
