import sys
from pathlib import Path

def main():
    if len(sys.argv) != 2:
        print("Usage: corrupt_one_byte.py <mfsymlink>")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    b = bytearray(p.read_bytes())

    # Target starts after the marker, length and checksum lines.
    idx = -1
    for _ in range(3):
        idx = b.find(b"\n", idx + 1)
        if idx == -1:
            print("Not an mfsymlink: fewer than four lines.")
            raise SystemExit(2)
    idx += 1
    if idx >= len(b):
        print("Empty target, nothing to corrupt.")
        raise SystemExit(2)

    b[idx] ^= 0x01
    p.write_bytes(bytes(b))
    print(f"Corrupted 1 byte at offset {idx} in {p}")

if __name__ == "__main__":
    main()
