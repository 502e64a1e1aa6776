import threading
import unittest

from dropboxfs.stream.pipe import Pipe


def _drain(pipe: Pipe, out: list, chunk: int = 3) -> None:
    while True:
        data = pipe.reader.read(chunk)
        if not data:
            return
        out.append(data)


class TestPipe(unittest.TestCase):
    def test_bytes_arrive_in_order_with_backpressure(self) -> None:
        pipe = Pipe(buffer_size=4)
        out: list = []
        reader = threading.Thread(target=_drain, args=(pipe, out))
        reader.start()

        payload = bytes(range(100))
        for i in range(0, len(payload), 7):
            self.assertEqual(pipe.writer.write(payload[i : i + 7]), len(payload[i : i + 7]))
        pipe.writer.close()
        reader.join(timeout=5)

        self.assertFalse(reader.is_alive())
        self.assertEqual(b"".join(out), payload)

    def test_read_all_until_writer_closes(self) -> None:
        pipe = Pipe()
        pipe.writer.write(b"abc")
        pipe.writer.write(bytearray(b"def"))
        pipe.writer.close()
        self.assertEqual(pipe.reader.read(), b"abcdef")
        self.assertEqual(pipe.reader.read(10), b"")

    def test_sized_reads_span_write_boundaries(self) -> None:
        pipe = Pipe()
        pipe.writer.write(b"ab")
        pipe.writer.write(b"cde")
        pipe.writer.write(b"f")
        pipe.writer.close()

        self.assertEqual(pipe.reader.read(4), b"abcd")
        self.assertEqual(pipe.reader.read(1), b"e")
        self.assertEqual(pipe.reader.read(4), b"f")
        self.assertEqual(pipe.reader.read(4), b"")

    def test_full_buffer_drains_in_small_reads(self) -> None:
        pipe = Pipe(buffer_size=1024)
        payload = bytes(i % 256 for i in range(1024))
        self.assertEqual(pipe.writer.write(payload), 1024)
        pipe.writer.close()

        out = []
        while True:
            data = pipe.reader.read(100)
            if not data:
                break
            self.assertLessEqual(len(data), 100)
            out.append(data)

        self.assertEqual(b"".join(out), payload)

    def test_iteration_yields_chunks_until_eof(self) -> None:
        pipe = Pipe()
        pipe.writer.write(b"xyz")
        pipe.writer.close()
        self.assertEqual(b"".join(pipe.reader), b"xyz")

    def test_zero_size_read(self) -> None:
        pipe = Pipe()
        self.assertEqual(pipe.reader.read(0), b"")

    def test_writer_error_reaches_reader_after_drain(self) -> None:
        pipe = Pipe()
        pipe.writer.write(b"ab")
        pipe.writer.close(RuntimeError("aborted"))

        self.assertEqual(pipe.reader.read(5), b"ab")
        with self.assertRaises(RuntimeError):
            pipe.reader.read(5)

    def test_reader_error_reaches_blocked_writer(self) -> None:
        pipe = Pipe(buffer_size=2)
        errors: list = []

        def write() -> None:
            try:
                pipe.writer.write(b"0123456789")
            except Exception as exc:
                errors.append(exc)

        writer = threading.Thread(target=write)
        writer.start()
        self.assertEqual(pipe.reader.read(2), b"01")
        pipe.reader.close(ValueError("upload failed"))
        writer.join(timeout=5)

        self.assertFalse(writer.is_alive())
        self.assertEqual(len(errors), 1)
        self.assertIsInstance(errors[0], ValueError)

    def test_write_after_reader_closed_without_error(self) -> None:
        pipe = Pipe()
        pipe.reader.close()
        with self.assertRaises(BrokenPipeError):
            pipe.writer.write(b"x")

    def test_write_after_writer_closed(self) -> None:
        pipe = Pipe()
        pipe.writer.close()
        with self.assertRaises(BrokenPipeError):
            pipe.writer.write(b"x")

    def test_read_after_reader_closed(self) -> None:
        pipe = Pipe()
        pipe.reader.close()
        with self.assertRaises(BrokenPipeError):
            pipe.reader.read(1)

    def test_first_close_wins(self) -> None:
        pipe = Pipe()
        pipe.reader.close(ValueError("first"))
        pipe.reader.close(KeyError("second"))
        with self.assertRaises(ValueError):
            pipe.writer.write(b"x")

    def test_rejects_non_positive_buffer(self) -> None:
        with self.assertRaises(ValueError):
            Pipe(buffer_size=0)


if __name__ == "__main__":
    unittest.main()
