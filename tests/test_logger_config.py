import io
import json
import unittest
from contextlib import redirect_stderr

from maybepy import Maybe, ConsoleLogger, ContractViolation, Settings, configure, get_logger, get_settings, reset_settings


class TestConsoleLogger(unittest.TestCase):
    def test_level_filtering_and_fields(self):
        buf = io.StringIO()
        log = ConsoleLogger("t", level="INFO", stream=buf)
        log.debug("hidden")
        log.bind(op="bind").info("shown", n=1)
        lines = buf.getvalue().strip().splitlines()
        self.assertEqual(len(lines), 1)
        self.assertIn("t INFO: shown n=1 op=bind", lines[0])

    def test_json_output(self):
        buf = io.StringIO()
        log = ConsoleLogger("t", level="DEBUG", json_output=True, stream=buf)
        log.error("boom", op="check")
        rec = json.loads(buf.getvalue())
        self.assertEqual(rec["level"], "ERROR")
        self.assertEqual(rec["fields"], {"op": "check"})

    def test_set_level(self):
        log = ConsoleLogger(level="ERROR")
        self.assertEqual(log.level_name, "ERROR")
        log.set_level("debug")
        self.assertTrue(log.enabled("DEBUG"))
        log.set_level("nope")
        self.assertEqual(log.level_name, "DEBUG")


class TestSettings(unittest.TestCase):
    def tearDown(self):
        reset_settings()

    def test_from_env(self):
        s = Settings.from_env({"MAYBEPY_LOG_LEVEL": "debug", "MAYBEPY_LOG_JSON": "yes"})
        self.assertEqual((s.log_level, s.json_logs), ("DEBUG", True))
        d = Settings.from_env({})
        self.assertEqual((d.log_level, d.json_logs), ("WARN", False))

    def test_configure_overrides_default_messages(self):
        configure(default_error_message="nope")
        self.assertEqual(get_settings().default_error_message, "nope")
        with self.assertRaises(ContractViolation) as cm:
            Maybe.from_(None).value_or_throw()
        self.assertEqual(cm.exception.message, "nope")

    def test_configure_rejects_unknown_keys(self):
        with self.assertRaises(TypeError):
            configure(colour="blue")

    def test_contract_violation_is_logged_at_debug(self):
        configure(log_level="DEBUG", json_logs=True)
        self.assertEqual(get_logger().level_name, "DEBUG")
        buf = io.StringIO()
        with redirect_stderr(buf):
            with self.assertRaises(ContractViolation):
                Maybe.from_(1).check(lambda _: False, "too small")
            Maybe.from_(1).check(lambda _: False)
        recs = [json.loads(l) for l in buf.getvalue().strip().splitlines()]
        self.assertEqual(recs[0]["msg"], "contract violation")
        self.assertEqual(recs[0]["fields"], {"op": "check", "error": "too small"})
        self.assertEqual(recs[1]["msg"], "step produced no value")

    def test_silent_by_default(self):
        configure(log_level="WARN")
        buf = io.StringIO()
        with redirect_stderr(buf):
            Maybe.from_(1).bind(lambda _: None)
        self.assertEqual(buf.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
