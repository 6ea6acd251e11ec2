# clock.py
class TickClock:
    """
    Fixed-rate logical clock. The driving loop feeds it the current time in
    milliseconds and gets back how many game ticks are due, so movement speed
    does not depend on how often frames are drawn.
    """

    def __init__(self, rate: int, start_ms: int = 0, max_catchup: int = 5):
        if rate <= 0:
            raise ValueError(f"tick rate must be positive, got {rate}")
        self.interval_ms = 1000.0 / rate
        self.next_ms = start_ms + self.interval_ms
        self.max_catchup = max_catchup

    def due(self, now_ms: int) -> int:
        if now_ms < self.next_ms:
            return 0  # not time to move yet

        ticks = int((now_ms - self.next_ms) // self.interval_ms) + 1
        if ticks > self.max_catchup:
            # After a long stall, resync instead of fast-forwarding the snake.
            self.next_ms = now_ms + self.interval_ms
            return self.max_catchup
        self.next_ms += ticks * self.interval_ms
        return ticks
