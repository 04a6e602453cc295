from typing import Any
from unittest import TestCase as _TestCase, main as ut_main

from structlog import get_logger

from enumjson.codecs import EnumConverterFactory, NameTableRegistry
from enumjson.conf.settings import EnumJsonSettings
from enumjson.serializer import JsonSerializerOptions

logger = get_logger()
main = ut_main


class TestCase(_TestCase):
    """ Base test case, every test gets its own settings and name table registry so no state leaks between tests.
    """

    def setUp(self) -> None:
        super().setUp()
        self.log = logger.new()
        self.settings = EnumJsonSettings()
        self.registry = NameTableRegistry(settings=self.settings)

    def create_factory(self, **settings_overrides: Any) -> EnumConverterFactory:
        """ Build an EnumConverterFactory over this test's registry, with settings overrides if any are given."""
        if not settings_overrides:
            return EnumConverterFactory(registry=self.registry, settings=self.settings)
        settings = self.settings.model_copy(update=settings_overrides)
        return EnumConverterFactory(registry=NameTableRegistry(settings=settings), settings=settings)

    def create_options(self, **settings_overrides: Any) -> JsonSerializerOptions:
        return JsonSerializerOptions([self.create_factory(**settings_overrides)])
