from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
from scrapview.schemas import Attempt

@dataclass(frozen=True)
class Snapshot:
    generation: int
    url: str
    attempts: Tuple[Attempt, ...]

class InspectionSession:
    """
    Holds the one current attempt sequence.

    Every submission takes a generation token from ``begin``. A fetch that
    finishes after a newer submission has started is stale and ``commit``
    drops it, so the last submission started always wins. Sequences are
    replaced wholesale, never merged.
    """

    def __init__(self):
        self._generation = 0
        self._current: Optional[Snapshot] = None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def current(self) -> Optional[Snapshot]:
        return self._current

    def begin(self, url: str) -> int:
        self._generation += 1
        print(f"SUBMISSION #{self._generation}: {url}")
        return self._generation

    def commit(self, token: int, url: str, attempts: Sequence[Attempt]) -> bool:
        """Store ``attempts`` as current unless a newer submission started"""
        if token != self._generation:
            print(f"STALE RESULT #{token} for {url} discarded (current is #{self._generation})")
            return False
        self._current = Snapshot(generation=token, url=url, attempts=tuple(attempts))
        return True

    def reset(self):
        self._generation = 0
        self._current = None

session = InspectionSession()
