import pytest

from mfsym_core import SIZE, target_digest_hex

TARGET = b"../XXXX-XX-XX/XXXXXXXXXXXX"


def envelope(target: bytes, length: int | None = None, md5: str | None = None) -> bytes:
    """Unpadded mfsymlink body."""
    if length is None:
        length = len(target)
    if md5 is None:
        md5 = target_digest_hex(target)
    return b"XSym\n" + str(length).encode("ascii") + b"\n" + md5.encode("ascii") + b"\n" + target


def padded(target: bytes, length_field: bytes | None = None) -> bytes:
    """Full-size mfsymlink the way SMB clients write it: target, newline, space filler."""
    if length_field is None:
        length_field = b"%04d" % len(target)
    head = b"XSym\n" + length_field + b"\n" + target_digest_hex(target).encode("ascii") + b"\n"
    body = head + target + b"\n"
    return body + b" " * (SIZE - len(body))


@pytest.fixture
def valid_mfsymlink() -> bytes:
    return padded(TARGET)
