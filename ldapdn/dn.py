"""The parsed form of a distinguished name"""


class DistinguishedName(object):
    """Attribute types and values of a distinguished name

    Attributes:
     * common_name - the ``CN`` value, or None
     * attributes  - dict of attribute type to value; keys are case-sensitive
    """

    ATTR_COMMON_NAME = 'CN'
    ATTR_EMAIL = 'emailAddress'

    def __init__(self, attributes=None):
        if attributes is None:
            attributes = {}
        self.attributes = attributes
        self.common_name = attributes.get(DistinguishedName.ATTR_COMMON_NAME)

    @classmethod
    def from_common_name(cls, name):
        """Create a DN that only has a common name"""
        return cls({DistinguishedName.ATTR_COMMON_NAME: name})

    def get_email(self):
        """Get the ``emailAddress`` value, or None if not present"""
        return self.attributes.get(DistinguishedName.ATTR_EMAIL)

    def get_attr(self, attr_type, default=None):
        return self.attributes.get(attr_type, default)

    def __len__(self):
        return len(self.attributes)

    def __contains__(self, attr_type):
        return attr_type in self.attributes

    def __eq__(self, other):
        if not isinstance(other, DistinguishedName):
            return NotImplemented
        return self.common_name == other.common_name and self.attributes == other.attributes

    def __repr__(self):
        return 'DistinguishedName(common_name={0!r}, attributes={1!r})'.format(self.common_name, self.attributes)
