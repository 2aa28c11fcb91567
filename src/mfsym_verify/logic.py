"""Size pre-check and parser for MF-symlink files.

Both functions are pure: no I/O, no shared state, and malformed input is
reported through the returned ``ErrorKind`` rather than raised.
"""
from __future__ import annotations

import binascii
import re

from mfsym_core.digest import target_digest
from mfsym_core.protocol import FIELD_COUNT, MARKER_BYTES, MAX_LEN_DIGITS, MAX_TARGET_LEN, NEWLINE, SIZE

from .const import ErrorKind

_DECIMAL = re.compile(rb"[0-9]+")


def is_possible_candidate(size: int) -> bool:
    """Return True if a file of ``size`` bytes could be an MF-symlink."""
    return size == SIZE


def is_possible_symlink(info) -> bool:
    """Pre-check on filesystem metadata (``os.stat_result`` or anything with ``st_size``)."""
    return is_possible_candidate(info.st_size)


def _decode_target(raw: bytes) -> str:
    # Lossless: .encode("utf-8", "surrogateescape") returns the raw bytes.
    return raw.decode("utf-8", "surrogateescape")


def parse(content: bytes | bytearray | memoryview | None) -> tuple[str, ErrorKind | None]:
    """Decode an MF-symlink and return ``(target, error)``.

    On success ``error`` is None. On failure ``target`` is empty and ``error``
    is ``ErrorKind.NOT_MFSYMLINK`` for a malformed envelope or
    ``ErrorKind.MD5_MISMATCH`` when the envelope is sound but the target
    bytes do not match the stored checksum.
    """
    data = bytes(content) if content is not None else b""
    lines = data.split(NEWLINE, FIELD_COUNT - 1)
    if len(lines) != FIELD_COUNT:
        return "", ErrorKind.NOT_MFSYMLINK

    marker, length_field, md5_field, target = lines

    if marker != MARKER_BYTES:
        return "", ErrorKind.NOT_MFSYMLINK

    # int() would also take signs, whitespace and underscores
    if not _DECIMAL.fullmatch(length_field):
        return "", ErrorKind.NOT_MFSYMLINK
    # Leading zeros are allowed, so bound the significant digits before int().
    digits = length_field.lstrip(b"0")
    if len(digits) > MAX_LEN_DIGITS:
        return "", ErrorKind.NOT_MFSYMLINK
    declared_len = int(digits or b"0")
    if declared_len > MAX_TARGET_LEN:
        return "", ErrorKind.NOT_MFSYMLINK

    try:
        expected_md5 = binascii.unhexlify(md5_field)
    except binascii.Error:
        return "", ErrorKind.NOT_MFSYMLINK

    # Anything past the declared length is padding.
    if len(target) > declared_len:
        target = target[:declared_len]

    if target_digest(target) != expected_md5:
        return "", ErrorKind.MD5_MISMATCH

    return _decode_target(target), None
