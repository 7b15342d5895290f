#!/usr/bin/env python3
"""
LightEvents Demo
================

Run with: python -m lightevents.main [--verbose] [--frames N] [--record]

Opens a window, feeds pygame input through the event bus and shows a
small HUD counting key presses and clicks. ESC or closing the window quits.
"""
import argparse
import logging
import sys
from typing import Optional

from lightevents import config
from lightevents.core.bus import EventBus
from lightevents.core.hooks import EventLogger, LoggingEventBus, RecordingEventBus
from lightevents.core.resolve import event_handler
from lightevents.core.session import Session
from frontends.input_events import KeyEvent, MouseButtonEvent, QuitEvent

logger = logging.getLogger(__name__)

class Hud:
    """Counts input and decides when the demo should stop."""

    def __init__(self, bus: EventBus, quit_key: Optional[int] = None):
        self.quit_key = quit_key  # Key code that requests quit, None to ignore keys
        self.keys_pressed = 0
        self.clicks = 0
        self.quit_requested = False
        bus.subscribe(KeyEvent, self, self.on_key, config.CHANNEL_KEYBOARD)
        bus.subscribe(MouseButtonEvent, self, self.on_click, config.CHANNEL_MOUSE)
        bus.subscribe_by_name(QuitEvent, self, "on_quit", config.CHANNEL_SYSTEM)

    def on_key(self, event: KeyEvent) -> None:
        if not event.pressed:
            return
        self.keys_pressed += 1
        if self.quit_key is not None and event.key == self.quit_key:
            self.quit_requested = True

    def on_click(self, event: MouseButtonEvent) -> None:
        if event.pressed:
            self.clicks += 1

    @event_handler
    def on_quit(self, event: QuitEvent) -> None:
        self.quit_requested = True

    def status(self) -> str:
        return f"keys: {self.keys_pressed}  clicks: {self.clicks}"


class RecordingLoggingBus(LoggingEventBus, RecordingEventBus):
    """Bus used by --verbose --record. Hooks chain through super()."""


def make_bus(verbose: bool, record: bool) -> EventBus:
    if verbose and record:
        return RecordingLoggingBus(level=logging.DEBUG)
    if verbose:
        return LoggingEventBus(level=logging.DEBUG)
    if record:
        return RecordingEventBus()
    return EventBus()


class Demo:
    """Main demo controller."""

    def __init__(self, verbose: bool = False, record: bool = False):
        self.session = Session(lambda: make_bus(verbose, record))
        self.hud = Hud(self.session.bus)
        self.event_logger = EventLogger(self.session.bus, QuitEvent,
                                        channel=config.CHANNEL_SYSTEM)
        self.frame = 0

    @property
    def bus(self) -> EventBus:
        return self.session.bus

    def run(self, frames: int = 0) -> None:
        """Run the window loop. frames=0 runs until quit."""
        import pygame
        from frontends.pygame_input import PygameInputBridge

        pygame.init()
        screen = pygame.display.set_mode((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))
        pygame.display.set_caption("LightEvents Demo")
        font = pygame.font.Font(None, 32)
        clock = pygame.time.Clock()
        bridge = PygameInputBridge(self.bus, sender=self)
        self.hud.quit_key = pygame.K_ESCAPE

        if isinstance(self.bus, RecordingEventBus):
            self.bus.start_recording()

        try:
            while not self.hud.quit_requested:
                bridge.pump()
                screen.fill((20, 20, 30))
                screen.blit(font.render(self.hud.status(), True, (230, 230, 230)), (20, 20))
                pygame.display.flip()
                clock.tick(config.FPS)

                self.frame += 1
                if frames and self.frame >= frames:
                    break
        finally:
            if isinstance(self.bus, RecordingEventBus):
                history = self.bus.stop_recording()
                logger.info("Recorded %d event(s)", len(history))
            self.session.close()
            pygame.quit()


def main(argv=None):
    parser = argparse.ArgumentParser(description="LightEvents Demo")
    parser.add_argument('--verbose', action='store_true',
                        help='Log every send and delivery')
    parser.add_argument('--frames', type=int, default=0,
                        help='Stop after N frames (0 = run until quit)')
    parser.add_argument('--record', action='store_true',
                        help='Record events and report how many were sent')
    args = parser.parse_args(argv)

    config.configure_logging(verbose=args.verbose)

    try:
        import pygame  # noqa: F401
    except ImportError as e:
        print(f"Error: pygame is required for the demo: {e}")
        print("Install with: pip install pygame")
        sys.exit(1)

    demo = Demo(verbose=args.verbose, record=args.record)
    demo.run(frames=args.frames)
    print(demo.hud.status())


if __name__ == "__main__":
    main()
