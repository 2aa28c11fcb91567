"""MF-symlink checksum helpers."""
from __future__ import annotations

import hashlib


def target_digest(target: bytes) -> bytes:
    """MD5 of the length-truncated target bytes.

    MD5 is fixed by the on-disk format; it only guards against corruption.
    """
    return hashlib.md5(target, usedforsecurity=False).digest()


def target_digest_hex(target: bytes) -> str:
    """Hex form of ``target_digest``, as it appears on line three of the file."""
    return target_digest(target).hex()
