import os

from enumjson.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['ENUMJSON_CONFIG_YAML'] = os.environ.get('ENUMJSON_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
