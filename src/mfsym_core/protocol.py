"""MF-symlink protocol constants.

Single source of truth for the on-disk marker and layout.
See: https://wiki.samba.org/index.php/UNIX_Extensions#Minshall.2BFrench_symlinks
"""

# Layout: [Marker \n | Length \n | MD5 hex \n | Target + padding] = 1067 bytes
SIZE = 1067

MARKER = "XSym"
MARKER_BYTES = MARKER.encode("ascii")

NEWLINE = b"\n"
FIELD_COUNT = 4  # marker, length, checksum, target

# MD5 digest, stored as 32 hex chars
DIGEST_LEN = 16

# Largest declared length accepted, the range of a signed 64-bit int
MAX_TARGET_LEN = 2**63 - 1
MAX_LEN_DIGITS = len(str(MAX_TARGET_LEN))
