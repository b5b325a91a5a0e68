"""
Periodic callbacks for the game loop.

The session only ever talks to a Scheduler, so the real pygame timers can be
swapped for a ManualScheduler that tests drive by hand.
"""
from typing import Callable, Dict, List

import pygame  # type: ignore


class Timer:
    """A periodic callback that can be stopped and started again."""

    def __init__(self, interval_ms: int, callback: Callable[[], None]):
        self.interval_ms = interval_ms
        self.callback = callback
        self.active = False

    def start(self) -> None:
        raise NotImplementedError

    def stop(self) -> None:
        raise NotImplementedError


class Scheduler:
    def timer(self, interval_ms: int, callback: Callable[[], None]) -> Timer:
        """Create a stopped timer firing `callback` every `interval_ms`."""
        raise NotImplementedError

# ---------- Manual (tests / headless) ----------
class ManualTimer(Timer):
    def __init__(self, scheduler: "ManualScheduler", interval_ms: int, callback: Callable[[], None]):
        super().__init__(interval_ms, callback)
        self.scheduler = scheduler
        self.due_ms = 0

    def start(self) -> None:
        self.active = True
        self.due_ms = self.scheduler.now_ms + self.interval_ms

    def stop(self) -> None:
        self.active = False


class ManualScheduler(Scheduler):
    """Virtual clock; nothing fires until advance() is called."""

    def __init__(self):
        self.now_ms = 0
        self.timers: List[ManualTimer] = []

    def timer(self, interval_ms: int, callback: Callable[[], None]) -> ManualTimer:
        t = ManualTimer(self, interval_ms, callback)
        self.timers.append(t)
        return t

    def clock(self) -> int:
        return self.now_ms

    def advance(self, ms: int) -> int:
        """Move the clock forward, firing due timers in time order. Returns number of callbacks run."""
        target = self.now_ms + ms
        fired = 0
        while True:
            due = [t for t in self.timers if t.active and t.due_ms <= target]
            if not due:
                break
            # earliest first; creation order breaks ties
            t = min(due, key=lambda timer: timer.due_ms)
            self.now_ms = t.due_ms
            t.due_ms += t.interval_ms
            t.callback()
            fired += 1
        self.now_ms = target
        return fired

# ---------- pygame ----------
class PygameTimer(Timer):
    def __init__(self, event_type: int, interval_ms: int, callback: Callable[[], None]):
        super().__init__(interval_ms, callback)
        self.event_type = event_type

    def start(self) -> None:
        self.active = True
        pygame.time.set_timer(self.event_type, self.interval_ms)

    def stop(self) -> None:
        self.active = False
        pygame.time.set_timer(self.event_type, 0)


class PygameScheduler(Scheduler):
    """Each timer posts its own custom event; the event loop hands them to dispatch()."""

    def __init__(self):
        self.timers: Dict[int, PygameTimer] = {}

    def timer(self, interval_ms: int, callback: Callable[[], None]) -> PygameTimer:
        t = PygameTimer(pygame.event.custom_type(), interval_ms, callback)
        self.timers[t.event_type] = t
        return t

    def owns(self, event: pygame.event.Event) -> bool:
        return event.type in self.timers

    def dispatch(self, event: pygame.event.Event) -> bool:
        """Run the callback owning this event. Return True if the event was a timer event."""
        t = self.timers.get(event.type)
        if t is None:
            return False
        # a stopped timer can still have an event sitting in the queue
        if t.active:
            t.callback()
        return True
