import contextlib
import io
import logging
import os
import tempfile
import unittest
from pathlib import Path

from server_config import parse_config
from server_config.__main__ import main
from server_config.logging import LogFileSettings, LoggingSettings

_DOCUMENT = """
server:
  port: 8080
  routers:
    - prefix: /api
      middlewares:
        - type: auth
          config:
            secret: x
      handlers:
        - path: /ping
          type: static
"""


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = Path(tmp.name)
        previous = os.getcwd()
        os.chdir(self.root)
        self.addCleanup(os.chdir, previous)
        (self.root / "config.yaml").write_text(_DOCUMENT, encoding="utf-8")

        root_logger = logging.getLogger()
        saved_handlers, saved_level = list(root_logger.handlers), root_logger.level

        def _restore_logging() -> None:
            for handler in list(root_logger.handlers):
                root_logger.removeHandler(handler)
                handler.close()
            for handler in saved_handlers:
                root_logger.addHandler(handler)
            root_logger.setLevel(saved_level)

        self.addCleanup(_restore_logging)

    def _run(self, *argv: str) -> tuple[int, str, str]:
        stdout, stderr = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            code = main(list(argv))
        return code, stdout.getvalue(), stderr.getvalue()

    def test_check_prints_summary(self) -> None:
        code, out, _ = self._run("check", "./config.yaml")
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["port: 8080", "router /api: middlewares=1 handlers=1"])

    def test_dump_prints_normalized_yaml(self) -> None:
        code, out, _ = self._run("dump", "./config.yaml")
        self.assertEqual(code, 0)
        config = parse_config(out)
        self.assertEqual(config.server.port, "8080")
        self.assertEqual(config.server.routers[0].middlewares[0].config, {"secret": "x"})

    def test_missing_file_exits_with_error(self) -> None:
        code, out, err = self._run("check", "./missing.yaml")
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("No config loader produced data", err)

    def test_log_file_is_written(self) -> None:
        log_path = self.root / "logs" / "server-config.log"
        code, _, _ = self._run("--log-level", "INFO", "--log-file", str(log_path), "check", "./config.yaml")
        self.assertEqual(code, 0)
        for handler in logging.getLogger().handlers:
            handler.flush()
        self.assertIn("Config loaded.", log_path.read_text(encoding="utf-8"))

    def test_logging_defaults(self) -> None:
        settings = LoggingSettings()
        self.assertEqual(settings.level, "WARNING")
        self.assertIsNone(settings.file)
        self.assertEqual(LogFileSettings(path="server-config.log").keep_days, 7)

    def test_unknown_log_level_is_rejected(self) -> None:
        with self.assertRaises(SystemExit):
            self._run("--log-level", "LOUD", "check", "./config.yaml")


if __name__ == "__main__":
    unittest.main()
