import io
import json
import unittest
from contextlib import redirect_stderr

from tinyfp import ConsoleLogger, Left, Right, Some, for_each, log_value, log_left


class TestConsoleLogger(unittest.IsolatedAsyncioTestCase):
    async def test_plain_output_with_bound_fields(self):
        logger = ConsoleLogger("svc", level="DEBUG").bind(component="details")
        buf = io.StringIO()
        with redirect_stderr(buf):
            await logger.info("loaded", product="p1")
        line = buf.getvalue().strip()
        self.assertIn("svc INFO: loaded", line)
        self.assertIn("component=details", line)
        self.assertIn("product=p1", line)

    async def test_level_filtering(self):
        logger = ConsoleLogger(level="WARN")
        buf = io.StringIO()
        with redirect_stderr(buf):
            await logger.info("hidden")
            await logger.error("shown")
            logger.set_level("debug")
            await logger.debug("now shown")
        lines = buf.getvalue().strip().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertEqual(logger.level_name, "DEBUG")

    def test_json_output(self):
        logger = ConsoleLogger("svc", json_output=True)
        buf = io.StringIO()
        with redirect_stderr(buf):
            logger.emit("ERROR", "failed", error="boom")
        rec = json.loads(buf.getvalue())
        self.assertEqual(rec["level"], "ERROR")
        self.assertEqual(rec["msg"], "failed")
        self.assertEqual(rec["fields"], {"error": "boom"})


class TestPipelineLogging(unittest.TestCase):
    def test_log_actions_in_tee(self):
        logger = ConsoleLogger("svc", level="DEBUG", json_output=True)
        buf = io.StringIO()
        with redirect_stderr(buf):
            Right(3).tee(log_value(logger, "got")).tee_left(log_left(logger, "failed"))
            Left("nope").tee(log_value(logger, "got")).tee_left(log_left(logger, "failed"))
            Some(Some(1)).tee(log_value(logger, "nested"))
            for_each([1, 2], log_value(logger, "item"))
        recs = [json.loads(l) for l in buf.getvalue().splitlines()]
        self.assertEqual([r["msg"] for r in recs], ["got", "failed", "nested", "item", "item"])
        self.assertEqual(recs[0]["fields"], {"value": 3})
        self.assertEqual(recs[1]["level"], "WARN")
        self.assertEqual(recs[2]["fields"], {"value": "Some(value=1)"})

    def test_lowercase_level_in_pipeline_action(self):
        logger = ConsoleLogger("svc", level="debug", json_output=True)
        buf = io.StringIO()
        with redirect_stderr(buf):
            out = Right(3).tee(log_value(logger, "got", level="info"))
            Left("e").tee_left(log_left(logger, "failed", level="error"))
            logger.emit("warn", "direct")
        self.assertEqual(out, Right(3))
        recs = [json.loads(l) for l in buf.getvalue().splitlines()]
        self.assertEqual([r["level"] for r in recs], ["INFO", "ERROR", "WARN"])

    def test_unknown_level_is_rejected(self):
        logger = ConsoleLogger("svc")
        with self.assertRaises(ValueError):
            log_value(logger, "got", level="verbose")
        with self.assertRaises(ValueError):
            logger.emit("trace", "nope")
