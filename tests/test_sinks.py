import io
import threading

import pytest

from bunyan_log import BufferSink, StdoutSink, StreamSink

class TestBufferSink:
    def test_write_and_records(self):
        sink = BufferSink()
        sink.write(b'{"a":1}\n')
        sink.write(b'{"a":2}\n')
        assert sink.getvalue() == b'{"a":1}\n{"a":2}\n'
        assert sink.records() == [{"a": 1}, {"a": 2}]

    def test_perform_returns_result(self):
        sink = BufferSink()
        assert sink.perform(lambda w: w.write(b"abc")) == 3

    def test_perform_holds_lock(self):
        sink = BufferSink()
        seen = []
        sink.perform(lambda w: seen.append(sink._lock.locked()))
        assert seen == [True]
        assert not sink._lock.locked()

    def test_errors_propagate_and_release_lock(self):
        sink = BufferSink()

        def boom(w):
            raise OSError("broken pipe")

        with pytest.raises(OSError):
            sink.perform(boom)
        assert not sink._lock.locked()

    def test_concurrent_writes_never_interleave(self):
        sink = BufferSink()
        line = b"x" * 4096 + b"\n"

        def worker():
            for _ in range(50):
                sink.write(line)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        lines = sink.getvalue().splitlines(keepends=True)
        assert len(lines) == 400
        assert all(l == line for l in lines)

class TestStdoutSink:
    def test_writes_to_current_stdout(self, capsys):
        sink = StdoutSink()
        print("before")
        sink.write(b'{"a":1}\n')
        assert capsys.readouterr().out == 'before\n{"a":1}\n'

    def test_text_only_stream(self, monkeypatch):
        stream = io.StringIO()
        monkeypatch.setattr("sys.stdout", stream)
        StdoutSink().write('{"msg":"café"}\n'.encode("utf-8"))
        assert stream.getvalue() == '{"msg":"café"}\n'

    def test_missing_stdout_drops_write(self, monkeypatch):
        monkeypatch.setattr("sys.stdout", None)
        StdoutSink().write(b'{"a":1}\n')

class TestStreamSink:
    def test_writes_and_leaves_stream_open(self):
        stream = io.BytesIO()
        sink = StreamSink(stream)
        sink.write(b"one\n")
        sink.write(b"two\n")
        assert not stream.closed
        assert stream.getvalue() == b"one\ntwo\n"

    def test_closed_stream_raises(self):
        stream = io.BytesIO()
        stream.close()
        with pytest.raises(ValueError):
            StreamSink(stream).write(b"x\n")
