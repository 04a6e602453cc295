import pytest

from enumjson.codecs import EnumCodec, NameTable
from enumjson.exception import EnumJsonError, MalformedValue, UnknownEnumMember
from enumjson_tests import unittest
from enumjson_tests.fixtures import AccessType, Color


class EnumCodecTestCase(unittest.TestCase):
    def setUp(self) -> None:
        super().setUp()
        self.codec = EnumCodec(self.registry.get(AccessType))

    def test_write_by_name(self) -> None:
        self.assertEqual(self.codec.value_to_json(AccessType.Read), 'Read')
        self.assertEqual(self.codec.value_to_json(AccessType.Write), 'Write')
        self.assertEqual(self.codec.value_to_json(AccessType.Admin), 'Admin')

    def test_read_by_name(self) -> None:
        self.assertIs(self.codec.json_to_value('Read'), AccessType.Read)
        self.assertIs(self.codec.json_to_value('Admin'), AccessType.Admin)

    def test_round_trip(self) -> None:
        for member in AccessType:
            self.assertIs(self.codec.json_to_value(self.codec.value_to_json(member)), member)

    def test_read_is_case_sensitive(self) -> None:
        with self.assertRaises(UnknownEnumMember) as cm:
            self.codec.json_to_value('read')
        self.assertIs(cm.exception.enum_class, AccessType)
        self.assertEqual(cm.exception.name, 'read')

    def test_read_empty_string_is_unknown_member(self) -> None:
        with self.assertRaises(UnknownEnumMember) as cm:
            self.codec.json_to_value('')
        self.assertEqual(str(cm.exception), "unknown AccessType member: ''")

    def test_read_unknown_name(self) -> None:
        with self.assertRaises(UnknownEnumMember):
            self.codec.json_to_value('Owner')

    def test_read_null_is_malformed(self) -> None:
        with self.assertRaises(MalformedValue) as cm:
            self.codec.json_to_value(None)
        self.assertIsNone(cm.exception.value)

    def test_write_non_member(self) -> None:
        with self.assertRaises(TypeError):
            self.codec.value_to_json(0)  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            self.codec.value_to_json(Color.Red)  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            self.codec.value_to_json(None)  # type: ignore[arg-type]

    def test_codec_over_non_int_enum(self) -> None:
        codec = EnumCodec(NameTable.build(Color))
        self.assertEqual(codec.value_to_json(Color.Green), 'Green')
        self.assertIs(codec.json_to_value('Blue'), Color.Blue)
        # values are not names
        with self.assertRaises(UnknownEnumMember):
            codec.json_to_value('g')
        # aliases are not accepted on read, and are written with the canonical name
        with self.assertRaises(UnknownEnumMember):
            codec.json_to_value('Crimson')
        self.assertEqual(codec.value_to_json(Color.Crimson), 'Red')


@pytest.mark.parametrize('json_value', [0, 1, 2.5, True, False, [], ['Read'], {}, {'name': 'Read'}])
def test_read_non_string_is_malformed(json_value: object) -> None:
    codec = EnumCodec(NameTable.build(AccessType))
    with pytest.raises(MalformedValue) as e:
        codec.json_to_value(json_value)  # type: ignore[arg-type]
    assert e.value.value == json_value
    assert not isinstance(e.value, UnknownEnumMember)


def test_errors_are_value_errors() -> None:
    assert issubclass(MalformedValue, EnumJsonError)
    assert issubclass(UnknownEnumMember, EnumJsonError)
    assert issubclass(EnumJsonError, ValueError)
    assert not issubclass(MalformedValue, UnknownEnumMember)
    assert not issubclass(UnknownEnumMember, MalformedValue)
