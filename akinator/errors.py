"""Error codes and the exception raised by the tree and game code."""

from __future__ import annotations

from enum import IntEnum

_PREFIX = "TREE_ERR_"
_UNKNOWN = "UNKNOWN_TREE_ERROR"


class TreeErrorCode(IntEnum):
    """Numeric codes that classify failures of tree operations."""

    SUCCESS = 0
    DUMP_ERROR = 1
    TREE_DOES_NOT_EXIST = 2
    TREE_IS_EMPTY = 3
    ALLOCATION_ERROR = 4
    FILE_READING_ERROR = 5
    INCORRECT_TREE = 6
    FILE_OPEN_ERROR = 7
    FILE_PRINT_ERROR = 8
    NULL_PTR_ERROR = 9
    FILE_CLOSE_ERROR = 10
    STR_PRINT_ERROR = 11
    INSERTION_ERROR = 12
    INPUT_FILE_INCORRECT = 13
    FILL_NODE_ERROR = 14
    INPUT_SCAN_ERROR = 15
    TOO_FEW_COMMAND_LINE_ARGUMENTS = 16
    UNKNOWN_ERROR = 17
    INCORRECT_STATUS = 18


def error_name(code: int) -> str:
    """Return the symbolic name of an error code, or a fallback for unknown codes."""
    try:
        return _PREFIX + TreeErrorCode(code).name
    except ValueError:
        return _UNKNOWN


class AkinatorError(Exception):
    """Raised when a tree, file or game operation fails."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{error_name(code)}] {message}")