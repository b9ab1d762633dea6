from __future__ import annotations


class HexxError(Exception):
    """Fatal input or I/O problem reported before any rows are rendered."""


class InvalidNumericArgument(HexxError):
    def __init__(self, option: str, value: str) -> None:
        super().__init__(f"Invalid argument given for {option}: {value}")
        self.option = option
        self.value = value


class MissingFilename(HexxError):
    def __init__(self) -> None:
        super().__init__("no input file given")


class FileOpenError(HexxError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed in opening file {path}: {reason}")
        self.path = path


class FileReadError(HexxError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed while reading file contents of {path}: {reason}")
        self.path = path
