"""Shared test helpers for Pomodoro."""

from pomodoro.timer.engine import TimerEngine, Snapshot


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def run_ticks(engine: TimerEngine, count: int, delta: float = 0.01) -> list[Snapshot]:
    """Tick *count* times and return every snapshot."""
    return [engine.tick(delta) for _ in range(count)]


def finish_interval(engine: TimerEngine) -> Snapshot:
    """Run the current interval to zero in one tick."""
    if not engine.is_running:
        engine.toggle_running()
    return engine.tick(engine.remaining)
