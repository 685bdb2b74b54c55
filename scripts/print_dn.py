#!/usr/bin/env python3
"""Parse a distinguished name given on the command line, or a sample DN, and print the result"""
from ldapdn import parse_distinguished_name_str, enable_logging, ParseError
import sys

SAMPLE_DN = 'C=DE,CN=Hans Tester,OU=ACME Inc.,O=ACME Inc.,L=Berlin,ST=Berlin'


def main(argv):
    if '-v' in argv:
        argv.remove('-v')
        enable_logging()
    dn_str = argv[0] if argv else SAMPLE_DN
    try:
        dn = parse_distinguished_name_str(dn_str)
    except ParseError as e:
        print('Invalid DN: {0}'.format(e))
        return 1
    print(dn)
    for attr_type in sorted(dn.attributes):
        print('{0}: {1}'.format(attr_type, dn.attributes[attr_type]))
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
