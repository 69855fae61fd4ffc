"""
Main digirain application class.
"""
import dataclasses
import logging
import time

from ..utils import check_unicode_support, init_colors
from .bootstrap import configure_terminal, disable_flow_control
from .config import RainConfig
from .engine import RainEngine
from .event_loop import draw_frame, run_app_loop
from .host import TerminalHost
from .key_router import handle_key_event
from .rendering import draw_rain, draw_statusbar
from .scheduler import Scheduler

LOGGER = logging.getLogger(__name__)

APP_VERSION = '0.3.0'

UNICODE_SYMBOL_SETS = ('katakana', 'halfwidth')


class DigitalRain:
    """Wires the terminal host and the tick schedule to the rain engine."""

    def __init__(self, stdscr, config=None, clock=time.monotonic):
        self.stdscr = stdscr
        self.running = True
        self.paused = False

        config = config or RainConfig()
        if config.symbols in UNICODE_SYMBOL_SETS and not check_unicode_support():
            LOGGER.info('terminal lacks unicode, falling back to ascii symbols')
            config = dataclasses.replace(config, symbols='ascii')
        self.config = config

        configure_terminal(stdscr, timeout_ms=config.frame_interval_ms)
        disable_flow_control()
        self.extended_colors = init_colors(config.theme)

        self.host = TerminalHost(stdscr, default_size=(config.screen_width, config.screen_height))
        self.engine = RainEngine(config)

        self.scheduler = Scheduler(clock=clock)
        self.scheduler.add('monitor', config.monitor_period, self.monitor_window_size)
        self.scheduler.add('spawn', config.spawn_period, self.engine.spawn_droplet)
        self.scheduler.add('move', config.move_period, self.engine.move_droplets)
        self.scheduler.add('fade', 0, self.engine.fade_droplets)

        # The grid must be sized before the first spawn.
        self.monitor_window_size()

    def monitor_window_size(self):
        width, height = self.host.physical_size()
        return self.engine.monitor_window_size(width, height)

    def update(self, now=None):
        """Run every tick handler that is due at ``now``."""
        return self.scheduler.update(now)

    def toggle_fullscreen(self):
        return self.host.toggle_fullscreen()

    def toggle_pause(self):
        """Freeze spawning and falling; trails keep fading."""
        self.paused = not self.paused
        self.scheduler.set_enabled('spawn', not self.paused)
        self.scheduler.set_enabled('move', not self.paused)
        return self.paused

    def clear(self):
        self.engine.clear()

    def handle_key(self, key):
        return handle_key_event(self, key)

    def draw_rain(self):
        return draw_rain(self)

    def draw_statusbar(self):
        draw_statusbar(self, APP_VERSION)

    def draw(self):
        draw_frame(self)

    def run(self):
        run_app_loop(self)

    def cleanup(self):
        self.running = False
        LOGGER.info('exiting with %d live glyphs', self.engine.glyph_count)
