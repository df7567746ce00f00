import threading


class SequenceCounter:
    """
    8 bit rolling sequence number. The controller only uses it for ordering
    diagnostics, there is no acknowledgement tied to it.
    """
    MODULO = 256

    def __init__(self, start: int = 1) -> None:
        self._value = start % self.MODULO
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            value = self._value
            self._value = (self._value + 1) % self.MODULO

        return value
