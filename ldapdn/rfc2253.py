"""Character classes from RFC 2253

https://tools.ietf.org/html/rfc2253
"""

## Section 3

ALPHA = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz'
DIGIT = '0123456789'
HEX = DIGIT + 'ABCDEFabcdef'

keychar = ALPHA + DIGIT + '-'
oidchar = DIGIT + '.'

special = ',=+<>#;'
QUOTATION = '"'
ESCAPE = '\\'

# separators between attributeTypeAndValue productions
name_componentsep = ','
rdn_sep = '+'
attr_sep = name_componentsep + rdn_sep


def _is_one_of(chars, c):
    return c is not None and len(c) == 1 and c in chars


def is_alpha(c):
    return _is_one_of(ALPHA, c)


def is_digit(c):
    return _is_one_of(DIGIT, c)


def is_hexchar(c):
    return _is_one_of(HEX, c)


def is_keychar(c):
    """Letters, digits and the hyphen"""
    return _is_one_of(keychar, c)


def is_oidchar(c):
    """Digits and the dot of a numeric OID"""
    return _is_one_of(oidchar, c)


def is_special(c):
    return _is_one_of(special, c)


def is_quotation(c):
    return c == QUOTATION


def is_escape(c):
    return c == ESCAPE
