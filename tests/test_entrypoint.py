import importlib
import sys
import unittest
from pathlib import Path
from unittest import mock

from _support import make_fake_curses, make_repo_tmpdir, purge_digirain_modules


class EntrypointTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls._prev_curses = sys.modules.get("curses")
        cls.fake_curses = make_fake_curses()
        sys.modules["curses"] = cls.fake_curses
        purge_digirain_modules()
        cls.main = importlib.import_module("digirain.__main__")

    @classmethod
    def tearDownClass(cls):
        purge_digirain_modules()
        if cls._prev_curses is not None:
            sys.modules["curses"] = cls._prev_curses
        else:
            sys.modules.pop("curses", None)

    def test_configure_logging_requires_debug_env(self):
        with mock.patch.object(self.main.logging, "basicConfig") as basic:
            self.assertFalse(self.main.configure_logging({}))
            basic.assert_not_called()
            self.assertTrue(self.main.configure_logging({"DIGIRAIN_DEBUG": "1", "DIGIRAIN_LOG": "rain.log"}))
        kwargs = basic.call_args.kwargs
        self.assertEqual(kwargs["level"], self.main.logging.DEBUG)
        self.assertEqual(kwargs["filename"], "rain.log")

    def test_resolve_config_applies_cli_overrides(self):
        parser = self.main.build_parser()
        with make_repo_tmpdir() as tmp:
            args = parser.parse_args(
                ["--config", str(Path(tmp) / "none.toml"), "--columns", "90", "--theme", "amber", "--seed", "3"]
            )
            config = self.main.resolve_config(args, parser)
        self.assertEqual(config.columns, 90)
        self.assertEqual(config.theme, "amber")
        self.assertEqual(config.seed, 3)
        self.assertEqual(config.max_characters, 750)

    def test_invalid_override_exits_with_parser_error(self):
        parser = self.main.build_parser()
        with make_repo_tmpdir() as tmp:
            args = parser.parse_args(["--config", str(Path(tmp) / "none.toml"), "--max-characters", "0"])
            with mock.patch("sys.stderr"), self.assertRaises(SystemExit) as ctx:
                self.main.resolve_config(args, parser)
        self.assertEqual(ctx.exception.code, 2)

    def test_write_config_saves_and_skips_curses(self):
        with make_repo_tmpdir() as tmp:
            path = Path(tmp) / "out" / "config.toml"
            with mock.patch.object(self.main, "run") as run, mock.patch("builtins.print"):
                code = self.main.main_cli(["--config", str(path), "--fps", "30", "--write-config"])
            self.assertEqual(code, 0)
            run.assert_not_called()
            self.assertIn("frame_rate = 30", path.read_text(encoding="utf-8"))

    def test_main_cli_runs_with_resolved_config(self):
        with make_repo_tmpdir() as tmp:
            with mock.patch.object(self.main, "run", return_value=0) as run:
                code = self.main.main_cli(["--config", str(Path(tmp) / "none.toml"), "--symbols", "digits"])
        self.assertEqual(code, 0)
        self.assertEqual(run.call_args[0][0].symbols, "digits")

    def test_run_returns_exit_codes(self):
        config = object()
        with mock.patch.object(self.fake_curses, "wrapper", create=True, return_value=None):
            self.assertEqual(self.main.run(config), 0)
        with mock.patch.object(self.fake_curses, "wrapper", create=True, side_effect=KeyboardInterrupt):
            self.assertEqual(self.main.run(config), 130)
        with mock.patch.object(self.fake_curses, "wrapper", create=True, side_effect=RuntimeError("boom")), \
                mock.patch.object(self.fake_curses, "endwin") as endwin, \
                mock.patch("builtins.print"), mock.patch.object(self.main.traceback, "print_exc"):
            self.assertEqual(self.main.run(config), 1)
        endwin.assert_called_once_with()


if __name__ == "__main__":
    unittest.main()
