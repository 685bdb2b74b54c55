"""Public parse functions and package logging"""

from .dn import DistinguishedName
from .exceptions import ParseError
from .parser import Parser
import logging

logger = logging.getLogger('ldapdn')
logger.addHandler(logging.NullHandler())
logger.setLevel(logging.DEBUG)  # set to DEBUG to allow handler levels full discretion

# logging config
LOG_FORMAT = '[%(asctime)s] %(name)s %(levelname)s : %(message)s'


def enable_logging(level=logging.DEBUG):
    """Enable logging output to stderr"""
    stderr_handler = logging.StreamHandler()
    stderr_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    stderr_handler.setLevel(level)
    logger.addHandler(stderr_handler)
    return stderr_handler


def parse_distinguished_name(chars, allow_empty_values=None):
    """Parse a distinguished name given as a sequence of characters

    :param chars: Sequence of one-character strings, e.g. ``list('CN=foo')``
    :param allow_empty_values: Accept attributes with an empty value. Defaults to
                               :attr:`.Parser.DEFAULT_ALLOW_EMPTY_VALUES`.
    :type allow_empty_values: bool or None
    :return: The parsed distinguished name
    :rtype: DistinguishedName
    :raises ParseError: if the input is not a valid distinguished name
    """
    logger.debug('Parsing distinguished name of {0} characters'.format(len(chars)))
    parser = Parser(chars, allow_empty_values)
    attrs = parser.parse_attributes()
    return DistinguishedName(attrs)


def parse_distinguished_name_str(dn_str, allow_empty_values=None):
    """Parse the string representation of a distinguished name

    :param dn_str: The DN string. Bytes are decoded as UTF-8.
    :type dn_str: str or bytes
    :param allow_empty_values: See :func:`parse_distinguished_name`
    :return: The parsed distinguished name
    :rtype: DistinguishedName
    :raises ParseError: if the input is not a valid distinguished name
    """
    if isinstance(dn_str, bytes):
        try:
            dn_str = dn_str.decode('utf-8')
        except UnicodeDecodeError as e:
            raise ParseError('Distinguished name is not valid UTF-8: {0}'.format(e))
    return parse_distinguished_name(list(dn_str), allow_empty_values)
