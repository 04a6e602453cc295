import threading
import time
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

from enumjson.codecs import NameTable
from enumjson.serializer import deserialize, serialize
from enumjson_tests import unittest
from enumjson_tests.fixtures import AccessType, NullableEnum

N_THREADS = 8


class ConcurrentFirstUseTestCase(unittest.TestCase):
    def test_name_table_built_once(self) -> None:
        build = NameTable.build
        calls: list[type] = []

        def slow_build(enum_class):
            calls.append(enum_class)
            # widen the window between the cache miss and the insertion
            time.sleep(0.01)
            return build(enum_class)

        barrier = threading.Barrier(N_THREADS)

        def first_use(_: int) -> NameTable:
            barrier.wait()
            return self.registry.get(AccessType)

        with patch.object(NameTable, 'build', side_effect=slow_build):
            with ThreadPoolExecutor(max_workers=N_THREADS) as executor:
                tables = list(executor.map(first_use, range(N_THREADS)))

        self.assertEqual(calls, [AccessType])
        self.assertEqual(len({id(table) for table in tables}), 1)
        self.assertEqual(len(self.registry), 1)

    def test_concurrent_conversions(self) -> None:
        options = self.create_options()
        barrier = threading.Barrier(N_THREADS)
        items = [NullableEnum(access, None, AccessType.Admin) for access in [*AccessType, None]]

        def convert(index: int) -> list[NullableEnum]:
            barrier.wait()
            results = []
            for _ in range(50):
                item = items[index % len(items)]
                results.append(deserialize(serialize(item, options=options), NullableEnum, options=options))
            return results

        with ThreadPoolExecutor(max_workers=N_THREADS) as executor:
            all_results = list(executor.map(convert, range(N_THREADS)))

        for index, results in enumerate(all_results):
            self.assertEqual(results, [items[index % len(items)]] * 50)
        self.assertIs(options.get_codec(NullableEnum), options.get_codec(NullableEnum))
        self.assertEqual(len(self.registry), 1)
