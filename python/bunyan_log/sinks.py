# Sinks: where serialized records go. One record is one locked write.

from __future__ import annotations
import io, json, sys, threading
from abc import ABC, abstractmethod
from typing import Any, BinaryIO, Callable, Dict, List, TypeVar

T = TypeVar("T")

class Sink(ABC):
    """Owned output target. perform() holds the lock for exactly one record."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    @abstractmethod
    def _writer(self) -> Any:
        """The underlying writer, resolved per record."""

    def perform(self, write_fn: Callable[[Any], T]) -> T:
        # I/O errors propagate; the logger decides what to do with them
        with self._lock:
            return write_fn(self._writer())

    def write(self, data: bytes) -> None:
        self.perform(lambda w: w.write(data))

class _StdoutWriter:
    def __init__(self, stream: Any) -> None:
        self._stream = stream

    def write(self, data: bytes) -> None:
        stream = self._stream
        # pythonw and detached daemons run with sys.stdout = None
        if stream is None:
            return
        buf = getattr(stream, "buffer", None)
        if buf is None:
            stream.write(data.decode("utf-8"))
            stream.flush()
            return
        # keep ordering with anything already sitting in the text layer
        stream.flush()
        buf.write(data)
        buf.flush()

class StdoutSink(Sink):
    """Live sink: whatever sys.stdout is at write time, flushed per record."""

    def _writer(self) -> _StdoutWriter:
        return _StdoutWriter(sys.stdout)

class StreamSink(Sink):
    """A caller-owned binary stream (file, pipe). The sink never closes it."""

    def __init__(self, stream: BinaryIO) -> None:
        super().__init__()
        self._stream = stream

    def _writer(self) -> BinaryIO:
        return self._stream

    def write(self, data: bytes) -> None:
        def _write(w: BinaryIO) -> None:
            w.write(data)
            w.flush()
        self.perform(_write)

class BufferSink(Sink):
    """In-memory sink for tests."""

    def __init__(self) -> None:
        super().__init__()
        self._buf = io.BytesIO()

    def _writer(self) -> io.BytesIO:
        return self._buf

    def getvalue(self) -> bytes:
        with self._lock:
            return self._buf.getvalue()

    def records(self) -> List[Dict[str, Any]]:
        return [json.loads(line) for line in self.getvalue().splitlines()]
