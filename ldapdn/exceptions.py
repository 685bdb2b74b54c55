class DNError(Exception):
    """Base class for all exceptions raised by ldapdn"""
    pass


class ParseError(DNError):
    """Raised when a string is not a valid RFC 2253 distinguished name

    All parse failures are instances of this class. The subclasses only narrow down the cause.
    """
    def __init__(self, msg, position=None):
        self.position = position
        if position is not None:
            msg = '{0} (at offset {1})'.format(msg, position)
        DNError.__init__(self, msg)


class MalformedSeparatorError(ParseError):
    """Something other than a comma or plus sign followed an attribute"""
    pass


class MissingEqualsError(ParseError):
    """No equals sign after the attribute type"""
    pass


class InvalidAttributeTypeError(ParseError):
    """The attribute type starts with neither a letter nor a digit"""
    pass


class UnescapedQuoteError(ParseError):
    """A bare quotation mark inside an unquoted value"""
    pass


class UnterminatedQuoteError(ParseError):
    """A quoted value was never closed"""
    pass


class InvalidHexStringError(ParseError):
    """A #-prefixed value contains something other than hex pairs"""
    pass


class InvalidEscapeError(ParseError):
    """A backslash is followed by a character that cannot be escaped"""
    pass


class InvalidHexPairError(ParseError):
    """Two characters that do not form a valid hex-encoded character"""
    pass


class EmptyValueError(ParseError):
    """An attribute value was empty while empty values are disallowed"""
    pass
