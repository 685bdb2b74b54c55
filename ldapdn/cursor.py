"""Position tracking over a sequence of characters"""


class Cursor(object):
    """A read-only view over a sequence of characters with a current offset

    The sequence is any indexable of one-character strings (a ``str``, ``list`` or ``tuple``). Characters are code
    points, so multi-byte characters are a single unit.
    """
    def __init__(self, chars):
        self.chars = chars
        self.position = 0

    def peek(self):
        """Get the character at the current position without consuming it

        :return: The current character, or None at end of input
        :rtype: str or None
        """
        if self.position < len(self.chars):
            return self.chars[self.position]
        else:
            return None

    def is_at_end(self):
        return self.position >= len(self.chars)

    def advance(self):
        """Move forward by one character. Callers check :meth:`peek` first."""
        self.position += 1

    def __repr__(self):
        return '<Cursor position={0} of {1}>'.format(self.position, len(self.chars))
