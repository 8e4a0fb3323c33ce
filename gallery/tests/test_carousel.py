import threading

from django.test import SimpleTestCase

from gallery.carousel import DEFAULT_INTERVAL, HeroCarousel, RepeatingTimer


class ManualTimer:
    def __init__(self, interval, callback):
        self.interval  = interval
        self.callback  = callback
        self.cancelled = False

    def fire(self, times=1):
        for _ in range(times):
            if not self.cancelled:
                self.callback()

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """Records registrations; ticks only when a test fires them."""

    def __init__(self):
        self.timers = []

    def call_every(self, interval, callback):
        timer = ManualTimer(interval, callback)
        self.timers.append(timer)
        return timer


class HeroCarouselTest(SimpleTestCase):
    """Test the auto-advancing hero carousel."""

    def setUp(self):
        self.scheduler = ManualScheduler()
        self.images = ['a', 'b', 'c']

    def test_default_interval(self):
        """Test the carousel advances every five seconds by default."""
        carousel = HeroCarousel(self.images, scheduler=self.scheduler)
        carousel.start()
        self.assertEqual(DEFAULT_INTERVAL, 5)
        self.assertEqual(self.scheduler.timers[0].interval, 5)

    def test_ticks_advance_and_wrap(self):
        """Test each tick moves to the next image, wrapping at the end."""
        carousel = HeroCarousel(self.images, scheduler=self.scheduler)
        carousel.start()
        timer = self.scheduler.timers[0]

        timer.fire()
        self.assertEqual(carousel.current_image, 'b')
        timer.fire(2)
        self.assertEqual(carousel.current_index, 0)
        self.assertEqual(carousel.current_image, 'a')

    def test_no_timer_for_zero_or_one_image(self):
        """Test no timer is registered when there is nothing to rotate."""
        for images in ([], ['only']):
            carousel = HeroCarousel(images, scheduler=self.scheduler)
            carousel.start()
            self.assertFalse(carousel.running)
            self.assertFalse(carousel.autoplays)
        self.assertEqual(self.scheduler.timers, [])

    def test_empty_carousel_has_no_current_image(self):
        """Test an empty hero reports no current image."""
        carousel = HeroCarousel([], scheduler=self.scheduler)
        self.assertIsNone(carousel.current_image)
        carousel.advance()
        self.assertEqual(carousel.current_index, 0)

    def test_start_twice_registers_one_timer(self):
        """Test a running carousel owns exactly one timer."""
        carousel = HeroCarousel(self.images, scheduler=self.scheduler)
        carousel.start()
        carousel.start()
        self.assertEqual(len(self.scheduler.timers), 1)

    def test_stop_cancels_timer(self):
        """Test stop cancels the timer and later ticks have no effect."""
        carousel = HeroCarousel(self.images, scheduler=self.scheduler)
        carousel.start()
        timer = self.scheduler.timers[0]
        carousel.stop()
        timer.fire()
        self.assertTrue(timer.cancelled)
        self.assertFalse(carousel.running)
        self.assertEqual(carousel.current_index, 0)

    def test_late_tick_after_stop_is_ignored(self):
        """Test a tick delivered after stop does not move the carousel."""
        carousel = HeroCarousel(self.images, scheduler=self.scheduler)
        carousel.start()
        timer = self.scheduler.timers[0]
        carousel.stop()
        # Bypass the cancelled flag, as a tick already in flight would.
        timer.callback()
        self.assertEqual(carousel.current_index, 0)

    def test_stop_is_idempotent(self):
        """Test stop is safe on a carousel that never started."""
        carousel = HeroCarousel(self.images, scheduler=self.scheduler)
        carousel.stop()
        carousel.stop()
        self.assertFalse(carousel.running)

    def test_context_manager_tears_down(self):
        """Test leaving the with-block cancels the timer."""
        with HeroCarousel(self.images, scheduler=self.scheduler) as carousel:
            self.assertTrue(carousel.running)
        self.assertTrue(self.scheduler.timers[0].cancelled)


class RepeatingTimerTest(SimpleTestCase):
    """Test the thread-backed timer used outside of tests."""

    def test_fires_until_cancelled(self):
        """Test the callback runs on its own thread and stops on cancel."""
        fired = threading.Event()
        timer = RepeatingTimer(0.01, fired.set)
        timer.start()
        try:
            self.assertTrue(fired.wait(timeout=2))
        finally:
            timer.cancel()
            timer.join(timeout=2)
        self.assertTrue(timer.cancelled)
        self.assertFalse(timer.is_alive())

    def test_stop_joins_thread(self):
        """Test stopping a carousel waits for its timer thread to exit."""
        carousel = HeroCarousel(['a', 'b'], interval=0.01)
        carousel.start()
        timer = carousel._timer
        carousel.stop()
        self.assertTrue(timer.cancelled)
        self.assertFalse(timer.is_alive())

    def test_callback_errors_are_logged_and_ticking_continues(self):
        """Test a failing tick is logged and the next tick still runs."""
        fired = threading.Event()
        calls = []

        def callback():
            calls.append(1)
            if len(calls) == 1:
                raise RuntimeError('boom')
            fired.set()

        timer = RepeatingTimer(0.01, callback)
        with self.assertLogs('gallery.carousel', level='ERROR') as logs:
            timer.start()
            try:
                self.assertTrue(fired.wait(timeout=2))
            finally:
                timer.cancel()
                timer.join(timeout=2)

        self.assertIn('boom', '\n'.join(logs.output))
        self.assertGreaterEqual(len(calls), 2)
