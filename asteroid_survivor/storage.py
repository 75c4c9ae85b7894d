import json
import math
from pathlib import Path
from typing import Protocol

from .log import get_logger
from .settings import BEST_TIME_KEY


log = get_logger(__name__)


class BestTimeStore(Protocol):
    def get_best_time(self) -> float | None: ...

    def set_best_time(self, elapsed_ms: float) -> None: ...


def parse_best_time(value) -> float | None:
    """Accept a finite, non-negative number (or numeric string); anything else is absent."""
    if isinstance(value, bool):
        return None
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(parsed) or parsed < 0:
        return None
    return parsed


class MemoryBestTimeStore:
    def __init__(self, best_time_ms: float | None = None) -> None:
        self.best_time_ms = best_time_ms
        self.writes: list[float] = []

    def get_best_time(self) -> float | None:
        return self.best_time_ms

    def set_best_time(self, elapsed_ms: float) -> None:
        self.best_time_ms = elapsed_ms
        self.writes.append(elapsed_ms)


class JsonBestTimeStore:
    """Single best survival time kept in a small JSON file under a fixed key."""

    def __init__(self, path: str | Path, key: str = BEST_TIME_KEY) -> None:
        self.path = Path(path)
        self.key = key

    def get_best_time(self) -> float | None:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            log.warning("ignoring unreadable best time file %s: %s", self.path, exc)
            return None
        if not isinstance(data, dict):
            log.warning("ignoring best time file %s: expected an object", self.path)
            return None
        best = parse_best_time(data.get(self.key))
        if best is None and self.key in data:
            log.warning("ignoring malformed best time %r in %s", data[self.key], self.path)
        return best

    def set_best_time(self, elapsed_ms: float) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({self.key: elapsed_ms}, indent=2), encoding="utf-8")
        except OSError as exc:
            log.warning("could not save best time to %s: %s", self.path, exc)
