"""Imports and defines the public API"""

from .base import parse_distinguished_name, parse_distinguished_name_str, enable_logging
from .dn import DistinguishedName
from .exceptions import DNError, ParseError
from .parser import Parser

__all__ = [
    'parse_distinguished_name',
    'parse_distinguished_name_str',
    'enable_logging',
    'DistinguishedName',
    'DNError',
    'ParseError',
    'Parser',
]
