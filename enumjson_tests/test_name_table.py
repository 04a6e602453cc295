from enum import Enum

import pytest

from enumjson.codecs import NameTable, NameTableRegistry
from enumjson.conf.settings import EnumJsonSettings
from enumjson_tests import unittest
from enumjson_tests.fixtures import AccessType, Color, Permission


class NameTableTestCase(unittest.TestCase):
    def test_names_in_definition_order(self) -> None:
        table = NameTable.build(AccessType)
        self.assertEqual(list(table), ['Read', 'Write', 'Admin'])
        self.assertEqual(len(table), 3)
        self.assertIs(table.enum_class, AccessType)

    def test_name_to_member(self) -> None:
        table = NameTable.build(AccessType)
        for member in AccessType:
            self.assertIs(table.get_member(member.name), member)

    def test_member_to_name(self) -> None:
        table = NameTable.build(AccessType)
        self.assertEqual(table.get_name(AccessType.Read), 'Read')
        self.assertEqual(table.get_name(AccessType.Write), 'Write')
        self.assertEqual(table.get_name(AccessType.Admin), 'Admin')

    def test_lookup_is_exact(self) -> None:
        table = NameTable.build(AccessType)
        self.assertIsNone(table.get_member('read'))
        self.assertIsNone(table.get_member('READ'))
        self.assertIsNone(table.get_member(' Read'))
        self.assertIsNone(table.get_member(''))
        # no numeric fallback
        self.assertIsNone(table.get_member('0'))

    def test_aliases_are_excluded(self) -> None:
        table = NameTable.build(Color)
        self.assertEqual(list(table), ['Red', 'Green', 'Blue'])
        self.assertIsNone(table.get_member('Crimson'))
        # the alias resolves to the canonical member, which has the canonical name
        self.assertEqual(table.get_name(Color.Crimson), 'Red')

    def test_build_rejects_non_enum(self) -> None:
        with self.assertRaises(TypeError):
            NameTable.build(int)  # type: ignore[type-var]

    def test_build_rejects_flag(self) -> None:
        with self.assertRaises(TypeError):
            NameTable.build(Permission)  # type: ignore[type-var]

    def test_empty_enum(self) -> None:
        class Nothing(Enum):
            pass

        table = NameTable.build(Nothing)
        self.assertEqual(len(table), 0)
        self.assertIsNone(table.get_member('Anything'))


class NameTableRegistryTestCase(unittest.TestCase):
    def test_build_once(self) -> None:
        self.assertNotIn(AccessType, self.registry)
        table = self.registry.get(AccessType)
        self.assertIn(AccessType, self.registry)
        self.assertIs(self.registry.get(AccessType), table)
        self.assertEqual(len(self.registry), 1)

    def test_one_table_per_enum(self) -> None:
        access_table = self.registry.get(AccessType)
        color_table = self.registry.get(Color)
        self.assertIsNot(access_table, color_table)
        self.assertEqual(len(self.registry), 2)

    def test_registries_are_isolated(self) -> None:
        other = NameTableRegistry(settings=self.settings)
        self.assertIsNot(other.get(AccessType), self.registry.get(AccessType))

    def test_cache_disabled(self) -> None:
        registry = NameTableRegistry(settings=EnumJsonSettings(CACHE_NAME_TABLES=False))
        first = registry.get(AccessType)
        second = registry.get(AccessType)
        self.assertIsNot(first, second)
        self.assertEqual(list(first), list(second))
        self.assertEqual(len(registry), 0)

    def test_invalid_enum_is_not_cached(self) -> None:
        with self.assertRaises(TypeError):
            self.registry.get(Permission)  # type: ignore[type-var]
        self.assertNotIn(Permission, self.registry)


@pytest.mark.parametrize('enum_class', [AccessType, Color])
def test_every_name_maps_back_to_its_member(enum_class: type[Enum]) -> None:
    table = NameTable.build(enum_class)
    for name in table:
        member = table.get_member(name)
        assert member is not None
        assert table.get_name(member) == name
