import pytest

from canoser.cursor import Cursor
from canoser.exceptions import FieldTypeError, FieldValueError, MalformedValueError, UnderflowError
from canoser.fields import Bool, Bytes, Optional, Sequence, Str, Struct, Uint8, Uint16, Uint64


class Point(Struct):
    _fields = [
        ('x', Uint8),
        ('y', Uint16),
    ]


class Account(Struct):
    _fields = [
        ('address', Bytes),
        ('balance', Uint64),
        ('frozen', Bool),
        ('nickname', Optional.of(Str)),
        ('history', Sequence.of(Point)),
    ]


def test_encoding_is_concatenation() -> None:
    point = Point(x=5, y=256)
    assert point.encode() == bytes([0x05, 0x00, 0x01])
    assert point['x'] == Uint8(5)
    assert Point.from_bytes(b'\x05\x00\x01') == point


def test_members_from_mapping() -> None:
    assert Point({'x': 1, 'y': 2}) == Point(x=Uint8(1), y=Uint16(2))
    assert Point({'x': 1}, y=2) == Point(x=1, y=2)


def test_nested_round_trip() -> None:
    account = Account(
        address=b'\xaa' * 4,
        balance=1000,
        frozen=False,
        nickname='alice',
        history=[Point(x=1, y=2), {'x': 3, 'y': 4}],
    )
    data = account.encode()
    assert data.hex() == (
        '04aaaaaaaa'  # address
        'e803000000000000'  # balance
        '00'  # frozen
        '0105616c696365'  # nickname
        '02' '010200' '030400'  # history
    )
    cursor = Cursor(data)
    assert Account.decode(cursor) == account
    cursor.finalize()


def test_missing_member() -> None:
    with pytest.raises(FieldValueError):
        Point(x=1)


def test_unknown_member() -> None:
    with pytest.raises(FieldValueError):
        Point(x=1, y=2, z=3)


def test_member_kind_mismatch() -> None:
    with pytest.raises(FieldTypeError):
        Point(x=Uint16(1), y=2)


def test_decode_errors_propagate() -> None:
    with pytest.raises(UnderflowError):
        Point.from_bytes(b'\x05\x00')

    class Flags(Struct):
        _fields = [('a', Bool), ('b', Bool)]

    with pytest.raises(MalformedValueError):
        Flags.from_bytes(b'\x01\x07')


def test_empty_struct() -> None:
    assert Struct().encode() == b''
    assert Struct.from_bytes(b'') == Struct()


def test_hash_and_repr() -> None:
    assert len({Point(x=1, y=2), Point(x=1, y=2)}) == 1
    assert repr(Point(x=1, y=2)) == 'Point(x=Uint8(1), y=Uint16(2))'


def test_decode_failure_consumes_nothing() -> None:
    # a full point, then a second one cut short
    cursor = Cursor(b'\x05\x00\x01\x06\x00')
    Point.decode(cursor)
    with pytest.raises(UnderflowError):
        Point.decode(cursor)
    assert cursor.position == 3


def test_no_arbitrary_attributes() -> None:
    with pytest.raises(AttributeError):
        Struct().extra = 1  # type: ignore[attr-defined]


def test_duplicate_member_name() -> None:
    with pytest.raises(FieldValueError):
        class Twice(Struct):
            _fields = [('x', Uint8), ('x', Uint16)]


def test_member_kind_must_be_a_field() -> None:
    with pytest.raises(FieldTypeError):
        class Plain(Struct):
            _fields = [('x', int)]  # type: ignore[list-item]


def test_value_setter() -> None:
    point = Point(x=1, y=2)
    # members are written in declaration order whatever the order of the new dict
    point.value = {'y': Uint16(256), 'x': Uint8(5)}
    assert point.encode() == b'\x05\x00\x01'
    with pytest.raises(FieldValueError):
        point.value = {'x': Uint8(5)}
    with pytest.raises(FieldTypeError):
        point.value = {'x': Uint8(5), 'y': Uint8(6)}
    assert point['y'] == Uint16(256)
