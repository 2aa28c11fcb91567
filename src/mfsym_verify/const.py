from enum import Enum

ERRORS = {
  "E_NOT_MFSYMLINK": "not a mfsymlink",
  "E_MD5_MISMATCH": "corrupt mfsymlink: md5 checksum mismatch",
  "E_READ": "Unable to read file",
}


class ErrorKind(Enum):
    NOT_MFSYMLINK = "E_NOT_MFSYMLINK"
    MD5_MISMATCH = "E_MD5_MISMATCH"

    @property
    def code(self) -> str:
        return self.value

    @property
    def message(self) -> str:
        return ERRORS[self.value]
