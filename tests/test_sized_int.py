import struct

import pytest

from canoser.cursor import Cursor
from canoser.exceptions import FieldTypeError, FieldValueError, UnderflowError
from canoser.fields import Int8, Int16, Int32, Int64, Int128, Uint8, Uint16, Uint32, Uint64, Uint128


def _test_bounds_struct_pack(fmt: str, lower_bound: int, upper_bound: int) -> None:
    struct.pack(fmt, lower_bound)
    try:
        struct.pack(fmt, lower_bound - 1)
    except struct.error:
        pass
    else:
        assert False
    struct.pack(fmt, upper_bound)
    try:
        struct.pack(fmt, upper_bound + 1)
    except struct.error:
        pass
    else:
        assert False


@pytest.mark.parametrize('kind, fmt', [
    (Uint8, '<B'),
    (Uint16, '<H'),
    (Uint32, '<I'),
    (Uint64, '<Q'),
    (Int8, '<b'),
    (Int16, '<h'),
    (Int32, '<i'),
    (Int64, '<q'),
])
def test_bounds_match_struct(kind, fmt) -> None:
    assert kind.width == struct.calcsize(fmt)
    _test_bounds_struct_pack(fmt, kind.lower_bound(), kind.upper_bound())


@pytest.mark.parametrize('kind, fmt', [
    (Uint8, '<B'),
    (Uint16, '<H'),
    (Uint32, '<I'),
    (Uint64, '<Q'),
    (Int8, '<b'),
    (Int16, '<h'),
    (Int32, '<i'),
    (Int64, '<q'),
])
def test_encoding_is_little_endian(kind, fmt) -> None:
    for value in (kind.lower_bound(), 0, 1, kind.upper_bound() // 3, kind.upper_bound()):
        assert kind(value).encode() == struct.pack(fmt, value)


def test_128_bit_bounds() -> None:
    assert Uint128.lower_bound() == 0
    assert Uint128.upper_bound() == 340282366920938463463374607431768211455
    assert Int128.lower_bound() == -170141183460469231731687303715884105728
    assert Int128.upper_bound() == 170141183460469231731687303715884105727


@pytest.mark.parametrize('kind', [Uint8, Uint16, Uint32, Uint64, Uint128, Int8, Int16, Int32, Int64, Int128])
def test_round_trip_and_fixed_width(kind) -> None:
    for value in (kind.lower_bound(), 0, 1, 42, kind.upper_bound() - 1, kind.upper_bound()):
        data = kind(value).encode()
        assert len(data) == kind.width
        cursor = Cursor(data)
        field = kind.decode(cursor)
        assert field.value == value
        assert cursor.position == kind.width
        cursor.finalize()


def test_boundary_values() -> None:
    assert Uint8(0).encode() == b'\x00'
    assert Uint8(255).encode() == b'\xff'
    assert Uint8.from_bytes(b'\xff').value == 255
    assert Uint64(0).encode() == b'\x00' * 8
    assert Uint64(18446744073709551615).encode() == b'\xff' * 8
    assert Uint64.from_bytes(b'\xff' * 8).value == 18446744073709551615


def test_known_encodings() -> None:
    assert Uint16(0x0102).encode() == b'\x02\x01'
    assert Uint32(0x01020304).encode() == b'\x04\x03\x02\x01'
    assert Uint64(1).encode() == b'\x01' + b'\x00' * 7
    assert Int16(-2).encode() == b'\xfe\xff'


@pytest.mark.parametrize('kind', [Uint8, Uint16, Uint32, Uint64, Int64])
def test_underflow(kind) -> None:
    cursor = Cursor(b'\x01' * (kind.width - 1))
    with pytest.raises(UnderflowError):
        kind.decode(cursor)
    assert cursor.position == 0


def test_sequential_decode() -> None:
    cursor = Cursor(bytes([0x05, 0x00, 0x01]))
    assert Uint8.decode(cursor).value == 5
    assert Uint16.decode(cursor).value == 256
    assert cursor.is_empty()
    cursor.finalize()


@pytest.mark.parametrize('kind, value', [
    (Uint8, 256),
    (Uint8, -1),
    (Uint16, 65536),
    (Uint32, 2**32),
    (Uint64, 2**64),
    (Uint64, -1),
    (Int8, 128),
    (Int8, -129),
])
def test_out_of_range(kind, value) -> None:
    with pytest.raises(FieldValueError):
        kind(value)


@pytest.mark.parametrize('value', [1.0, '1', None, True, b'\x01'])
def test_wrong_type(value) -> None:
    with pytest.raises(FieldTypeError):
        Uint32(value)


def test_equality_and_hash() -> None:
    assert Uint8(1) == Uint8(1)
    assert Uint8(1) != Uint8(2)
    # same value but a different kind
    assert Uint8(1) != Uint16(1)
    assert len({Uint8(1), Uint8(1), Uint16(1)}) == 2
    assert repr(Uint32(7)) == 'Uint32(7)'


def test_value_setter_checks_the_new_value() -> None:
    field = Uint8(1)
    field.value = 2
    assert field.value == 2
    assert field.encode() == b'\x02'
    with pytest.raises(FieldValueError):
        field.value = 256
    with pytest.raises(FieldTypeError):
        field.value = 'x'  # type: ignore[assignment]
    # a rejected value leaves the old one in place
    assert field.value == 2
