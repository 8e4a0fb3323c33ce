"""
Auto-advancing hero carousel.

A started carousel owns exactly one recurring timer; `stop()` (or leaving
the `with` block) cancels it so no tick fires against a torn-down hero.
"""
import logging
import threading

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 5
STOP_TIMEOUT     = 1


class RepeatingTimer(threading.Thread):
    """Calls `callback` every `interval` seconds until cancelled."""

    def __init__(self, interval, callback):
        super().__init__(daemon=True)
        self.interval  = interval
        self.callback  = callback
        self._stopped  = threading.Event()

    def run(self):
        while not self._stopped.wait(self.interval):
            try:
                self.callback()
            except Exception:
                logger.exception('Repeating timer callback %r failed', self.callback)

    def cancel(self):
        self._stopped.set()

    @property
    def cancelled(self):
        return self._stopped.is_set()


class ThreadScheduler:
    def call_every(self, interval, callback):
        timer = RepeatingTimer(interval, callback)
        timer.start()
        return timer


class HeroCarousel:

    def __init__(self, images, interval=DEFAULT_INTERVAL, scheduler=None):
        self.images        = tuple(images)
        self.interval      = interval
        self.scheduler     = scheduler or ThreadScheduler()
        self.current_index = 0
        self._timer        = None

    @property
    def autoplays(self):
        return len(self.images) > 1

    @property
    def running(self):
        return self._timer is not None

    @property
    def current_image(self):
        if not self.images:
            return None
        return self.images[self.current_index]

    def advance(self):
        if not self.images:
            return
        self.current_index = (self.current_index + 1) % len(self.images)

    def _tick(self):
        if self.running:
            self.advance()

    def start(self):
        if not self.autoplays or self.running:
            return
        self._timer = self.scheduler.call_every(self.interval, self._tick)
        logger.debug('Hero carousel started with %d images', len(self.images))

    def stop(self):
        if self._timer is None:
            return
        timer, self._timer = self._timer, None
        timer.cancel()
        # An in-flight tick finishes before stop() returns.
        join = getattr(timer, 'join', None)
        if join is not None and timer is not threading.current_thread():
            join(timeout=STOP_TIMEOUT)

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *exc_info):
        self.stop()
        return False
