import io

import pytest

from binwrite.api import encode
from binwrite.endian import Endian
from binwrite.exceptions import SinkError
from binwrite.layout import U16
from binwrite.serializer import Serializer
from binwrite.stream_serializer import StreamSerializer
from binwrite.types import Buffer


class ShortWriteStream(io.RawIOBase):
    def __init__(self) -> None:
        super().__init__()
        self.data = bytearray()

    def writable(self) -> bool:
        return True

    def write(self, data: Buffer) -> int:
        view = memoryview(data)
        self.data += view[:1]
        return 1


class WouldBlockStream(io.RawIOBase):
    def writable(self) -> bool:
        return True

    def write(self, data: Buffer) -> None:
        return None


class FailingFlushStream:
    closed = False

    def __init__(self) -> None:
        self.data = bytearray()

    def write(self, data: Buffer) -> int:
        view = memoryview(data)
        self.data += view
        return view.nbytes

    def flush(self) -> None:
        raise OSError('disk full')


def test_tracks_position_without_seeking() -> None:
    stream = io.BytesIO()
    se = Serializer.build_stream_serializer(stream)
    assert isinstance(se, StreamSerializer)
    se.write_bytes(b'abc')
    se.write_byte(0x64)
    se.write_struct((1,), '>H')
    assert se.cur_pos() == 6
    assert stream.getvalue() == b'abcd\x00\x01'


def test_finalize_is_not_supported() -> None:
    se = StreamSerializer(io.BytesIO())
    with pytest.raises(TypeError):
        se.finalize()


def test_short_write_is_a_sink_error() -> None:
    stream = ShortWriteStream()
    se = StreamSerializer(stream)
    with pytest.raises(SinkError, match='short write'):
        se.write_bytes(b'abc')
    assert se.cur_pos() == 1
    assert bytes(stream.data) == b'a'


def test_closed_stream() -> None:
    stream = io.BytesIO()
    stream.close()
    se = StreamSerializer(stream)
    with pytest.raises(SinkError, match='closed'):
        se.write_bytes(b'a')


def test_would_block_is_a_sink_error() -> None:
    se = StreamSerializer(WouldBlockStream())
    with pytest.raises(SinkError, match='would block at position 0'):
        se.write_bytes(b'ab')
    assert se.cur_pos() == 0


def test_encode_reports_would_block() -> None:
    se = StreamSerializer(WouldBlockStream())
    result = encode(U16, 1, se, endian=Endian.BIG)
    assert result.is_err()
    assert isinstance(result.err(), SinkError)
    assert se.cur_pos() == 0


def test_flush_forwards_to_stream() -> None:
    raw = io.BytesIO()
    se = StreamSerializer(io.BufferedWriter(raw))
    se.write_bytes(b'abc')
    se.flush()
    assert raw.getvalue() == b'abc'


def test_flush_failure_is_a_sink_error() -> None:
    stream = FailingFlushStream()
    se = StreamSerializer(stream)  # type: ignore[arg-type]
    se.write_bytes(b'a')
    with pytest.raises(SinkError, match='flush failed') as exc_info:
        se.flush()
    assert isinstance(exc_info.value.__cause__, OSError)
    assert bytes(stream.data) == b'a'
