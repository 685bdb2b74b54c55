"""Recursive-descent parser for the RFC 2253 string representation of distinguished names

Each grammar production is one method on :class:`Parser`. Productions consume characters from the parser's
:class:`.Cursor` and either return the decoded value or raise a :class:`.ParseError` subclass; the first failure
aborts the whole parse.
"""

from . import rfc2253
from .cursor import Cursor
from .exceptions import (
    MalformedSeparatorError,
    MissingEqualsError,
    InvalidAttributeTypeError,
    UnescapedQuoteError,
    UnterminatedQuoteError,
    InvalidHexStringError,
    InvalidEscapeError,
    InvalidHexPairError,
    EmptyValueError,
)
import logging

logger = logging.getLogger(__name__)


class Parser(object):
    """Parses one distinguished name. Create a new instance for every input."""

    # global defaults
    DEFAULT_ALLOW_EMPTY_VALUES = True

    def __init__(self, chars, allow_empty_values=None):
        """
        :param chars: The input as a sequence of characters
        :param allow_empty_values: Accept attributes like ``CN=``. Defaults to :attr:`DEFAULT_ALLOW_EMPTY_VALUES`.
        :type allow_empty_values: bool or None
        """
        if allow_empty_values is None:
            allow_empty_values = Parser.DEFAULT_ALLOW_EMPTY_VALUES
        self.cursor = Cursor(chars)
        self.allow_empty_values = allow_empty_values

    def _fail(self, exc_cls, msg):
        logger.debug('{0}: {1} at offset {2}'.format(exc_cls.__name__, msg, self.cursor.position))
        return exc_cls(msg, self.cursor.position)

    def parse_attributes(self):
        """distinguishedName = [name] ; name = name-component *("," name-component)

        Attributes of the same RDN (joined with ``+``) land in the same flat dict as comma-separated ones.

        :return: Attribute types mapped to their decoded values; a repeated type keeps its last value
        :rtype: dict
        """
        attrs = {}
        while not self.cursor.is_at_end():
            attr_type, attr_value = self.parse_attribute()
            attrs[attr_type] = attr_value

            c = self.cursor.peek()
            if c is None:
                break
            elif c in rfc2253.attr_sep:
                self.cursor.advance()
            else:
                raise self._fail(MalformedSeparatorError, 'Expected "," or "+" after attribute, got {0!r}'.format(c))
        return attrs

    def parse_attribute(self):
        """attributeTypeAndValue = attributeType "=" attributeValue

        :return: The attribute type and decoded value
        :rtype: tuple
        """
        attr_type = self.parse_attribute_type()

        if self.cursor.peek() != '=':
            raise self._fail(MissingEqualsError, 'Expected "=" after attribute type {0}'.format(attr_type))
        self.cursor.advance()

        attr_value = self.parse_string()
        if not attr_value and not self.allow_empty_values:
            raise self._fail(EmptyValueError, 'Empty value for attribute type {0}'.format(attr_type))
        return attr_type, attr_value

    def parse_attribute_type(self):
        """attributeType = (ALPHA 1*keychar) / oid"""
        c = self.cursor.peek()
        if rfc2253.is_alpha(c):
            return self._consume_while(rfc2253.is_keychar)
        elif rfc2253.is_digit(c):
            return self._consume_while(rfc2253.is_oidchar)
        elif c is None:
            raise self._fail(InvalidAttributeTypeError, 'Expected attribute type, got end of input')
        else:
            raise self._fail(InvalidAttributeTypeError, 'Attribute type cannot start with {0!r}'.format(c))

    def _consume_while(self, predicate):
        buf = []
        c = self.cursor.peek()
        while c is not None and predicate(c):
            buf.append(c)
            self.cursor.advance()
            c = self.cursor.peek()
        return ''.join(buf)

    def parse_string(self):
        """string = *( stringchar / pair ) / "#" hexstring / QUOTATION *( quotechar / pair ) QUOTATION"""
        c = self.cursor.peek()
        if rfc2253.is_quotation(c):
            return self.parse_quoted_string()
        elif c == '#':
            return self.parse_hex_string()
        else:
            return self.parse_simple_string()

    def parse_simple_string(self):
        """Unquoted value, ending at the next special character or the end of input"""
        buf = []
        while True:
            c = self.cursor.peek()
            if c is None or rfc2253.is_special(c):
                break
            elif rfc2253.is_quotation(c):
                raise self._fail(UnescapedQuoteError, 'Quotation mark in unquoted value must be escaped')
            elif rfc2253.is_escape(c):
                buf.append(self.parse_escape_sequence())
            else:
                buf.append(c)
                self.cursor.advance()
        return ''.join(buf)

    def parse_quoted_string(self):
        """Value enclosed in quotation marks. Special characters need no escaping inside."""
        if not rfc2253.is_quotation(self.cursor.peek()):
            raise self._fail(UnterminatedQuoteError, 'Expected opening quotation mark')
        self.cursor.advance()

        buf = []
        while True:
            c = self.cursor.peek()
            if c is None:
                raise self._fail(UnterminatedQuoteError, 'End of input inside quoted value')
            elif rfc2253.is_quotation(c):
                break
            elif rfc2253.is_escape(c):
                buf.append(self.parse_escape_sequence())
            else:
                buf.append(c)
                self.cursor.advance()

        if not rfc2253.is_quotation(self.cursor.peek()):
            raise self._fail(UnterminatedQuoteError, 'Expected closing quotation mark')
        self.cursor.advance()
        return ''.join(buf)

    def parse_hex_string(self):
        """Hex string: "#" 1*hexpair, each pair decoded to one character"""
        if self.cursor.peek() != '#':
            raise self._fail(InvalidHexStringError, 'Expected "#" to start hex string')
        self.cursor.advance()

        buf = []
        while not self.cursor.is_at_end():
            c = self.cursor.peek()
            if not rfc2253.is_hexchar(c):
                raise self._fail(InvalidHexStringError, 'Non-hex character {0!r} in hex string'.format(c))
            buf.append(self.parse_hex_pair())
        return ''.join(buf)

    def parse_escape_sequence(self):
        """pair = "\\" ( special / "\\" / QUOTATION / hexpair )"""
        if not rfc2253.is_escape(self.cursor.peek()):
            raise self._fail(InvalidEscapeError, 'Expected backslash')
        self.cursor.advance()

        c = self.cursor.peek()
        if c is None:
            raise self._fail(InvalidEscapeError, 'End of input after backslash')
        elif rfc2253.is_special(c) or rfc2253.is_quotation(c) or rfc2253.is_escape(c):
            self.cursor.advance()
            return c
        elif rfc2253.is_hexchar(c):
            return self.parse_hex_pair()
        else:
            raise self._fail(InvalidEscapeError, 'Cannot escape {0!r}'.format(c))

    def parse_hex_pair(self):
        """hexpair = hexchar hexchar

        Both characters are consumed before they are validated.

        :return: The character whose code is the hex value of the pair
        :rtype: str
        """
        digits = []
        for _ in range(2):
            c = self.cursor.peek()
            if c is None:
                raise self._fail(InvalidHexPairError, 'End of input inside hex pair')
            digits.append(c)
            self.cursor.advance()

        pair = ''.join(digits)
        # int() also accepts whitespace and underscores
        if not all(rfc2253.is_hexchar(d) for d in digits):
            raise self._fail(InvalidHexPairError, 'Invalid hex pair {0!r}'.format(pair))
        try:
            return chr(int(pair, 16))
        except ValueError:
            raise self._fail(InvalidHexPairError, 'Invalid hex pair {0!r}'.format(pair))
