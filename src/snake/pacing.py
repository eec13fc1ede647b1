# src/snake/pacing.py
from typing import Optional


class Pacer:
    """
    Fixed-interval tick gate owned by the driver.

    The driver passes its own clock reading to due(); the pacer only
    remembers when it last fired. Times are in seconds.
    """

    def __init__(self, interval_s: float, start_s: Optional[float] = None):
        if interval_s <= 0:
            raise ValueError(f"interval_s must be > 0, got {interval_s}")
        self.interval_s = interval_s
        self.last_s = start_s

    def due(self, now_s: float) -> bool:
        if self.last_s is None:
            self.last_s = now_s
            return False
        if now_s - self.last_s >= self.interval_s:
            self.last_s = now_s
            return True
        return False

    def reset(self, now_s: float) -> None:
        self.last_s = now_s
