"""Content-addressed store for raw instrumentation payloads."""

import hashlib
import logging
import threading

logger = logging.getLogger(__name__)


class DedupCache:
    """Keeps each distinct payload once, keyed by its SHA-256 digest.

    The compiler repeats the same function-times text in many compilation
    steps of a build log, so identical payloads are stored only once.
    """

    def __init__(self):
        self._payloads: dict[str, str] = {}
        self._lock = threading.Lock()

    @staticmethod
    def digest(text: str) -> str:
        return hashlib.sha256(text.encode("utf-8")).hexdigest()

    def observe(self, text: str, was_instrumented: bool) -> bool:
        """Store text if instrumented, non-empty and not seen before.

        Returns True only when the payload was newly stored.
        """
        if not was_instrumented or not text:
            return False
        key = self.digest(text)
        with self._lock:
            if key in self._payloads:
                logger.debug("Skipping duplicate payload %s", key[:12])
                return False
            self._payloads[key] = text
        return True

    def payloads(self) -> list[str]:
        """Unique payloads in the order they were first observed."""
        with self._lock:
            return list(self._payloads.values())

    def __contains__(self, text: str) -> bool:
        key = self.digest(text)
        with self._lock:
            return key in self._payloads

    def __len__(self) -> int:
        with self._lock:
            return len(self._payloads)
