"""MF-symlink Verify - Pre-check, parser and command line."""
from .const import ERRORS, ErrorKind
from .logic import is_possible_candidate, is_possible_symlink, parse

__all__ = ["ERRORS", "ErrorKind", "is_possible_candidate", "is_possible_symlink", "parse"]
