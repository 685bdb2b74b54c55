"""Provides support for setting global defaults and logging via config files and dicts"""

from .base import enable_logging
from .parser import Parser
import json
import logging
import yaml


def _default_mapper(val):
    return val


def _bool_mapper(val):
    if isinstance(val, bool):
        return val
    if isinstance(val, str):
        lval = val.lower()
        if lval in ('true', 'yes', 'on', '1'):
            return True
        if lval in ('false', 'no', 'off', '0'):
            return False
    raise TypeError('Expected a boolean, got {0!r}'.format(val))


_global_mappers = {
    'DEFAULT_ALLOW_EMPTY_VALUES': _bool_mapper,
}


def normalize_global_config_param(key):
    """Normalize a global config key. Does not check validity of the key.

    :param str key: User-supplied global config key
    :return: The normalized key formatted as an attribute of :class:`.Parser`
    :rtype: str
    """
    key = key.upper()
    if not key.startswith('DEFAULT_'):
        key = 'DEFAULT_'+key
    return key


def set_global_config(global_config_dict):
    """Set the global defaults. The dict must be formatted as follows::

        {'global': {
            <config param>: <config value>,
         }
        }

    ``<config param>`` must match one of the ``DEFAULT_`` attributes on :class:`.Parser`. The ``DEFAULT_`` prefix is
    optional and dict keys are case-insensitive. Any parameters not specified will keep the hard-coded default.

    :param dict global_config_dict: See above.
    :rtype: None
    :raises KeyError: if the dict is incorrectly formatted or contains unknown config parameters
    """
    bad = []
    for key, val in global_config_dict['global'].items():
        orig_key = key
        key = normalize_global_config_param(key)
        if hasattr(Parser, key):
            val = _global_mappers.get(key, _default_mapper)(val)
            setattr(Parser, key, val)
        else:
            bad.append(orig_key)
    if bad:
        raise KeyError('Unknown global config keys: {0}'.format(', '.join(bad)))


def enable_config_logging(config_dict):
    """Enable logging to stderr. The dict must be formatted as follows::

        {'logging': {
            'level': <level name>,  # optional, default DEBUG
         }
        }

    :param dict config_dict: See above.
    :return: The new log handler
    :rtype: logging.Handler
    :raises ValueError: if the level name is unknown
    """
    level_name = config_dict['logging'].get('level', 'DEBUG')
    level = logging.getLevelName(str(level_name).upper())
    if not isinstance(level, int):
        raise ValueError('Unknown logging level {0}'.format(level_name))
    return enable_logging(level)


def load_file(path, file_decoder=None):
    """Load a config file. Must decode to dict with all components described on other methods as optional sections/keys.
    A YAML example::

        global:
          ALLOW_EMPTY_VALUES: false
        logging:
          level: INFO

    :param path: A path to a config file. Provides support for YAML and JSON format, or you can specify your own decoder
                 that returns a dict.
    :param file_decoder: A callable returning a dict when passed a file-like object
    :rtype: None
    :raises RuntimeError: if an unsupported file extension was given without the ``file_decoder`` argument.
    """
    if file_decoder is None:
        if path.endswith('.yml') or path.endswith('.yaml'):
            file_decoder = yaml.safe_load
        elif path.endswith('.json'):
            file_decoder = json.load
        else:
            raise RuntimeError('Unsupported file type, must be YAML or JSON, or specify file_decoder argument')
    with open(path) as f:
        config_dict = file_decoder(f)
    load_config_dict(config_dict)


def load_config_dict(config_dict):
    """Load config parameters from a dictionary. Must be formatted in the same was as ``load_file``

    :param dict config_dict: The config dictionary. See format in ``load_file``.
    :rtype: None
    """
    if 'global' in config_dict:
        set_global_config(config_dict)
    if 'logging' in config_dict:
        enable_config_logging(config_dict)
