"""MF-symlink Core - Wire constants and checksum."""
from .digest import target_digest, target_digest_hex
from .protocol import MARKER, SIZE

__all__ = ["MARKER", "SIZE", "target_digest", "target_digest_hex"]
