import pytest

from canoser.writer import Writer


def test_writes_are_joined_in_order() -> None:
    writer = Writer()
    writer.write_byte(0x01)
    writer.write_bytes(b'\x02\x03')
    writer.write_bytes(memoryview(b'\x04'))
    assert writer.position == 4
    assert writer.finalize() == b'\x01\x02\x03\x04'


def test_empty() -> None:
    writer = Writer()
    assert writer.position == 0
    assert writer.finalize() == b''


@pytest.mark.parametrize('value', [-1, 256])
def test_byte_out_of_range(value) -> None:
    with pytest.raises(OverflowError):
        Writer().write_byte(value)
