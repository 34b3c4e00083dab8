from __future__ import annotations


class ValidationError(RuntimeError):
    pass


class SystemCnfError(ValidationError):
    """Base class for every SYSTEM.CNF decode failure."""


class MalformedFile(SystemCnfError):
    def __init__(self, message: str, line_no: int | None = None, line: str | None = None) -> None:
        super().__init__(message)
        self.line_no = line_no
        self.line = line


class MissingField(SystemCnfError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Required field missing: {field}")
        self.field = field


class UnknownVideoMode(SystemCnfError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Unknown video mode: {value!r}")
        self.value = value
