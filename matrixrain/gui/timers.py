from typing import Callable, Dict, Optional


class IntervalTimer:
    # dispara no máximo uma vez por `interval`; o primeiro advance só arma o timer
    def __init__(self, interval: float, callback: Callable[[], None]):
        self.interval = interval
        self.callback = callback
        self.group: Optional["TimerGroup"] = None
        self._last: Optional[float] = None

    @property
    def armed(self) -> bool:
        return self._last is not None

    def advance(self, now: float) -> bool:
        if self._last is None or now < self._last:  # relógio voltou: rearma
            self._last = now
            return False
        if now - self._last < self.interval:
            return False
        self._last = now  # sem rajada pra recuperar ticks perdidos
        self.callback()
        return True

    def cancel(self):
        if self.group is not None:
            self.group.discard(self)


class TimerGroup:
    def __init__(self):
        self._timers: Dict[IntervalTimer, None] = {}  # set ordenado

    def __len__(self):
        return len(self._timers)

    def register(self, timer: IntervalTimer) -> IntervalTimer:
        if timer.group is not None and timer.group is not self:
            timer.group.discard(timer)
        if timer.group is not self:
            timer.group = self
            self._timers[timer] = None
        return timer

    def discard(self, timer: IntervalTimer):
        if timer.group is self:
            del self._timers[timer]
            timer.group = None

    def advance(self, now: float) -> int:
        fired = 0
        # cópia: callbacks podem cancelar timers
        for t in list(self._timers):
            if t.group is self and t.advance(now):
                fired += 1
        return fired

    def clear(self):
        for t in self._timers:
            t.group = None
        self._timers.clear()
