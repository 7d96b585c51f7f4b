import threading
from typing import Dict, Tuple

from fastapi import Request

class ScoreStore:
    """In-memory id -> points map. One lock guards every read and write."""

    def __init__(self) -> None:
        self._points: Dict[str, int] = {}
        self._lock = threading.Lock()

    def put(self, receipt_id: str, points: int) -> None:
        with self._lock:
            self._points[receipt_id] = points

    def get(self, receipt_id: str) -> Tuple[int, bool]:
        with self._lock:
            if receipt_id not in self._points:
                return 0, False
            return self._points[receipt_id], True

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)

def get_store(request: Request) -> ScoreStore:
    return request.app.state.store
