import pytest

from canoser.cursor import Cursor
from canoser.exceptions import SerializationError, TrailingDataError, UnderflowError


def test_read_bytes_advances_position() -> None:
    cursor = Cursor(b'\x01\x02\x03\x04')
    assert bytes(cursor.read_bytes(1)) == b'\x01'
    assert cursor.position == 1
    assert bytes(cursor.read_bytes(3)) == b'\x02\x03\x04'
    assert cursor.position == 4
    assert cursor.is_empty()
    assert cursor.remaining() == 0


def test_read_zero_bytes() -> None:
    cursor = Cursor(b'')
    assert bytes(cursor.read_bytes(0)) == b''
    assert cursor.position == 0
    cursor.finalize()


def test_underflow_does_not_consume() -> None:
    cursor = Cursor(b'\xaa\xbb\xcc')
    cursor.read_byte()
    with pytest.raises(UnderflowError):
        cursor.read_bytes(3)
    assert cursor.position == 1
    # what was left can still be read
    assert bytes(cursor.read_bytes(2)) == b'\xbb\xcc'


def test_read_byte_on_empty() -> None:
    cursor = Cursor(b'')
    with pytest.raises(UnderflowError):
        cursor.read_byte()
    with pytest.raises(UnderflowError):
        cursor.peek_byte()


def test_negative_read() -> None:
    cursor = Cursor(b'\x00')
    with pytest.raises(SerializationError):
        cursor.read_bytes(-1)
    assert cursor.position == 0


def test_peek_does_not_consume() -> None:
    cursor = Cursor(b'\x10\x20')
    assert cursor.peek_byte() == 0x10
    assert bytes(cursor.peek_bytes(2)) == b'\x10\x20'
    assert cursor.position == 0
    with pytest.raises(UnderflowError):
        cursor.peek_bytes(3)


def test_read_all_and_finalize() -> None:
    cursor = Cursor(bytearray(b'head-tail'))
    cursor.read_bytes(5)
    assert bytes(cursor.read_all()) == b'tail'
    assert bytes(cursor.read_all()) == b''
    cursor.finalize()


def test_finalize_with_trailing_data() -> None:
    cursor = Cursor(b'\x00\x01')
    cursor.read_byte()
    with pytest.raises(TrailingDataError):
        cursor.finalize()


def test_buffer_is_not_modified() -> None:
    data = bytearray(b'\x01\x02')
    cursor = Cursor(data)
    view = cursor.read_bytes(2)
    assert view.readonly
    assert data == bytearray(b'\x01\x02')


def test_rewind() -> None:
    cursor = Cursor(b'\x01\x02\x03')
    start = cursor.position
    cursor.read_bytes(2)
    cursor.rewind(start)
    assert cursor.position == 0
    assert bytes(cursor.read_all()) == b'\x01\x02\x03'


def test_rewind_only_goes_back() -> None:
    cursor = Cursor(b'\x01\x02\x03')
    cursor.read_byte()
    with pytest.raises(SerializationError):
        cursor.rewind(2)
    with pytest.raises(SerializationError):
        cursor.rewind(-1)
    assert cursor.position == 1
