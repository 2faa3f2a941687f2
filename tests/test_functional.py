import unittest

from tinyfp import Unit, UNIT, tee, pipe


class TestUnit(unittest.TestCase):
    def test_all_units_equal(self):
        self.assertEqual(Unit(), UNIT)
        self.assertEqual(hash(Unit()), hash(UNIT))
        self.assertEqual(repr(UNIT), "Unit")


class TestObjectCombinators(unittest.TestCase):
    def test_tee_returns_value(self):
        registry = []
        services = {"name": "svc"}
        out = tee(tee(services, registry.append), lambda s: registry.append(s["name"]))
        self.assertIs(out, services)
        self.assertEqual(registry, [services, "svc"])

    def test_pipe(self):
        self.assertEqual(pipe(3), 3)
        self.assertEqual(pipe(3, lambda x: x + 1, str), "4")
