from ldapdn import config, Parser, parse_distinguished_name_str
from ldapdn.base import logger
from ldapdn.exceptions import EmptyValueError
import json
import logging
import os
import shutil
import tempfile
import unittest


class TestConfig(unittest.TestCase):
    def setUp(self):
        self.orig_allow_empty = Parser.DEFAULT_ALLOW_EMPTY_VALUES
        self.orig_handlers = list(logger.handlers)
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        Parser.DEFAULT_ALLOW_EMPTY_VALUES = self.orig_allow_empty
        logger.handlers = self.orig_handlers
        shutil.rmtree(self.tmpdir)

    def write_file(self, name, content):
        path = os.path.join(self.tmpdir, name)
        with open(path, 'w') as f:
            f.write(content)
        return path

    def test_normalize_global_config_param(self):
        """Ensure normalize_global_config_param functions correctly"""
        tests = [
            ('foo', 'DEFAULT_FOO'),
            ('DEFAULT_FOO', 'DEFAULT_FOO'),
            ('default_foo', 'DEFAULT_FOO'),
        ]

        for test, expected in tests:
            actual = config.normalize_global_config_param(test)
            self.assertEqual(expected, actual)

    def test_set_global_config(self):
        """Ensure set_global_config functions correctly"""
        with self.assertRaises(KeyError):
            config.set_global_config({'foo': 'bar'})

        with self.assertRaises(KeyError):
            config.set_global_config({'global': {
                'not_a_global_config_param': 'foo'
            }})

        config.set_global_config({'global': {'allow_empty_values': False}})
        self.assertIs(False, Parser.DEFAULT_ALLOW_EMPTY_VALUES)
        with self.assertRaises(EmptyValueError):
            parse_distinguished_name_str('CN=')

        config.set_global_config({'global': {'DEFAULT_ALLOW_EMPTY_VALUES': 'yes'}})
        self.assertIs(True, Parser.DEFAULT_ALLOW_EMPTY_VALUES)

        with self.assertRaises(TypeError):
            config.set_global_config({'global': {'allow_empty_values': 'maybe'}})

    def test_enable_config_logging(self):
        """Ensure a logging section adds a stderr handler at the given level"""
        handler = config.enable_config_logging({'logging': {'level': 'info'}})
        self.assertIn(handler, logger.handlers)
        self.assertEqual(logging.INFO, handler.level)

        handler = config.enable_config_logging({'logging': {}})
        self.assertEqual(logging.DEBUG, handler.level)

        with self.assertRaises(ValueError):
            config.enable_config_logging({'logging': {'level': 'chatty'}})

    def test_load_file_yaml(self):
        path = self.write_file('ldapdn.yml', 'global:\n  ALLOW_EMPTY_VALUES: false\nlogging:\n  level: WARNING\n')
        config.load_file(path)
        self.assertIs(False, Parser.DEFAULT_ALLOW_EMPTY_VALUES)
        self.assertEqual(len(self.orig_handlers) + 1, len(logger.handlers))

    def test_load_file_json(self):
        path = self.write_file('ldapdn.json', json.dumps({'global': {'allow_empty_values': False}}))
        config.load_file(path)
        self.assertIs(False, Parser.DEFAULT_ALLOW_EMPTY_VALUES)

    def test_load_file_unsupported(self):
        path = self.write_file('ldapdn.ini', '[global]\n')
        with self.assertRaises(RuntimeError):
            config.load_file(path)

        def decoder(f):
            strict = f.read().strip() == 'strict'
            return {'global': {'allow_empty_values': not strict}}

        path = self.write_file('ldapdn.conf', 'strict\n')
        config.load_file(path, file_decoder=decoder)
        self.assertIs(False, Parser.DEFAULT_ALLOW_EMPTY_VALUES)

    def test_load_config_dict_empty(self):
        config.load_config_dict({})
        self.assertEqual(self.orig_allow_empty, Parser.DEFAULT_ALLOW_EMPTY_VALUES)
        self.assertEqual(self.orig_handlers, logger.handlers)


if __name__ == '__main__':
    unittest.main()
