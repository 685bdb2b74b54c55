from ldapdn import rfc2253


def test_is_alpha():
    for c in ('a', 'z', 'A', 'Z'):
        assert rfc2253.is_alpha(c)
    for c in ('0', '-', 'ä', ' ', '', None, 'ab'):
        assert not rfc2253.is_alpha(c)


def test_is_digit():
    for c in '0123456789':
        assert rfc2253.is_digit(c)
    for c in ('a', '.', '٣', None):
        assert not rfc2253.is_digit(c)


def test_is_hexchar():
    for c in '0123456789abcdefABCDEF':
        assert rfc2253.is_hexchar(c)
    for c in ('g', 'G', 'x', ' ', None):
        assert not rfc2253.is_hexchar(c)


def test_is_special():
    for c in ',=+<>#;':
        assert rfc2253.is_special(c)
    for c in ('"', '\\', ' ', 'a', None):
        assert not rfc2253.is_special(c)


def test_type_chars():
    for c in ('a', 'Z', '5', '-'):
        assert rfc2253.is_keychar(c)
    assert not rfc2253.is_keychar('.')

    for c in ('5', '.'):
        assert rfc2253.is_oidchar(c)
    assert not rfc2253.is_oidchar('a')


def test_quotation_escape():
    assert rfc2253.is_quotation('"')
    assert not rfc2253.is_quotation("'")
    assert rfc2253.is_escape('\\')
    assert not rfc2253.is_escape('/')
