from __future__ import annotations

import importlib.util
import io
import unittest
from contextlib import redirect_stderr
from pathlib import Path
from unittest import mock

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "run_newsletter.py"


def load_script():
    spec = importlib.util.spec_from_file_location("run_newsletter_script", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class RunNewsletterArgsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.script = load_script()
        patcher = mock.patch.dict("os.environ", {}, clear=True)
        patcher.start()
        self.addCleanup(patcher.stop)

    def assert_usage_error(self, argv: list[str]) -> None:
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                self.script.parse_args(argv)
        self.assertEqual(ctx.exception.code, 2)

    def test_defaults_select_sample_source(self) -> None:
        args = self.script.parse_args([])

        self.assertEqual(args.log_level, "WARNING")
        self.assertIsInstance(self.script.select_source(args), self.script.SampleUserSource)

    def test_log_level_is_case_insensitive(self) -> None:
        self.assertEqual(self.script.parse_args(["--log-level", "debug"]).log_level, "DEBUG")

    def test_unknown_log_level_is_a_usage_error(self) -> None:
        self.assert_usage_error(["--log-level", "verbose"])

    def test_unknown_log_level_from_env_is_a_usage_error(self) -> None:
        with mock.patch.dict("os.environ", {"NEWSLETTER_LOG_LEVEL": "verbose"}):
            self.assert_usage_error([])

    def test_topic_requires_kafka(self) -> None:
        self.assert_usage_error(["--topic", "users.v2"])

    def test_topic_with_kafka_builds_kafka_source(self) -> None:
        args = self.script.parse_args(["--kafka", "--topic", "users.v2"])
        source = self.script.select_source(args)

        self.assertIsInstance(source, self.script.KafkaUserSource)
        self.assertEqual(source.topic, "users.v2")


if __name__ == "__main__":
    unittest.main()
