import logging

import structlog
from structlog.testing import capture_logs

from enumjson.codecs import EnumConverterFactory, NameTableRegistry
from enumjson.logging import setup_logging
from enumjson_tests import unittest
from enumjson_tests.fixtures import AccessType, Color


class CodecLoggingTestCase(unittest.TestCase):
    def test_name_table_build_is_logged_once(self) -> None:
        with capture_logs() as logs:
            registry = NameTableRegistry(settings=self.settings)
            registry.get(AccessType)
            registry.get(AccessType)
            registry.get(Color)

        built = [log for log in logs if log['event'] == 'name table built']
        self.assertEqual(built, [
            {'event': 'name table built', 'log_level': 'debug', 'enum': 'AccessType', 'members': 3},
            {'event': 'name table built', 'log_level': 'debug', 'enum': 'Color', 'members': 3},
        ])

    def test_resolution_is_logged(self) -> None:
        with capture_logs() as logs:
            factory = EnumConverterFactory(registry=NameTableRegistry(settings=self.settings), settings=self.settings)
            factory.resolve(AccessType | None)
            factory.resolve(int)

        resolved = [log for log in logs if log['event'] == 'codec resolved']
        self.assertEqual(len(resolved), 1)
        self.assertEqual(resolved[0]['codec'], 'OptionalEnumCodec')


class SetupLoggingTestCase(unittest.TestCase):
    def tearDown(self) -> None:
        structlog.reset_defaults()
        super().tearDown()

    def test_setup_logging_debug(self) -> None:
        setup_logging(debug=True)
        self.assertTrue(structlog.is_configured())
        self.assertEqual(logging.getLogger('enumjson').level, logging.DEBUG)

    def test_setup_logging_json(self) -> None:
        setup_logging(json_output=True, extra_log_info={'service': 'tests'})
        enumjson_logger = logging.getLogger('enumjson')
        self.assertEqual(enumjson_logger.level, logging.INFO)
        self.assertFalse(enumjson_logger.propagate)
        formatter = enumjson_logger.handlers[0].formatter
        self.assertIsInstance(formatter, structlog.stdlib.ProcessorFormatter)
