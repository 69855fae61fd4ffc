import importlib
import sys
import types
import unittest
from unittest import mock


def _install_fake_curses():
    fake = types.ModuleType("curses")
    fake.curs_set = mock.Mock()
    fake.noecho = mock.Mock()
    fake.cbreak = mock.Mock()
    return fake


def _make_fake_termios():
    fake = types.ModuleType("termios")
    fake.error = OSError
    fake.IXON = 0x0200
    fake.IXOFF = 0x0400
    fake.TCSANOW = 0
    fake.tcgetattr = mock.Mock(return_value=[fake.IXON | fake.IXOFF | 0x1, 0, 0, 0, 0, 0, 0])
    fake.tcsetattr = mock.Mock()
    return fake


class BootstrapTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls._prev_curses = sys.modules.get("curses")
        cls.fake_curses = _install_fake_curses()
        sys.modules["curses"] = cls.fake_curses
        sys.modules.pop("digirain.core.bootstrap", None)
        cls.bootstrap = importlib.import_module("digirain.core.bootstrap")

    @classmethod
    def tearDownClass(cls):
        sys.modules.pop("digirain.core.bootstrap", None)
        if cls._prev_curses is not None:
            sys.modules["curses"] = cls._prev_curses
        else:
            sys.modules.pop("curses", None)

    def setUp(self):
        self.bootstrap._reset_backend_cache()
        self.addCleanup(self.bootstrap._reset_backend_cache)

    def test_configure_terminal_applies_curses_setup(self):
        stdscr = types.SimpleNamespace(
            keypad=mock.Mock(),
            nodelay=mock.Mock(),
            timeout=mock.Mock(),
        )

        self.bootstrap.configure_terminal(stdscr, timeout_ms=33)

        self.fake_curses.curs_set.assert_called_once_with(0)
        self.fake_curses.noecho.assert_called_once_with()
        self.fake_curses.cbreak.assert_called_once_with()
        stdscr.keypad.assert_called_once_with(True)
        stdscr.nodelay.assert_called_once_with(False)
        stdscr.timeout.assert_called_once_with(33)

    def test_disable_flow_control_clears_xon_xoff(self):
        fake_termios = _make_fake_termios()
        stream = types.SimpleNamespace(fileno=mock.Mock(return_value=9))

        with mock.patch.object(self.bootstrap, "resolve_posix_backends", return_value=(object(), fake_termios)):
            self.assertTrue(self.bootstrap.disable_flow_control(stream))

        fake_termios.tcgetattr.assert_called_once_with(9)
        fd, when, attrs = fake_termios.tcsetattr.call_args[0]
        self.assertEqual((fd, when), (9, 0))
        self.assertEqual(attrs[0], 0x1)

    def test_disable_flow_control_tolerates_non_tty(self):
        fake_termios = _make_fake_termios()
        fake_termios.tcgetattr.side_effect = OSError("not a tty")
        stream = types.SimpleNamespace(fileno=mock.Mock(return_value=9))

        with mock.patch.object(self.bootstrap, "resolve_posix_backends", return_value=(object(), fake_termios)):
            self.assertFalse(self.bootstrap.disable_flow_control(stream))

        fake_termios.tcsetattr.assert_not_called()

    def test_disable_flow_control_without_backends(self):
        with mock.patch.object(self.bootstrap, "resolve_posix_backends", return_value=None):
            self.assertFalse(self.bootstrap.disable_flow_control())

    def test_resolve_posix_backends_caches_result(self):
        with mock.patch.object(self.bootstrap.importlib, "import_module", side_effect=ImportError) as imp:
            self.assertIsNone(self.bootstrap.resolve_posix_backends())
            self.assertIsNone(self.bootstrap.resolve_posix_backends())
        imp.assert_called_once_with("fcntl")


if __name__ == "__main__":
    unittest.main()
