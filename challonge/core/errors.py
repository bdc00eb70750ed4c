from typing import Any


class DecodeError(Exception):
    """Raised when a response payload cannot be turned into a typed record.

    Carries a short static reason and the offending value for diagnostics.
    """

    def __init__(self, reason: str, value: Any):
        super().__init__(reason, value)
        self.reason = reason
        self.value = value

    def __str__(self) -> str:
        return f"{self.reason}: {self.value!r}"


class UnknownVariantError(ValueError):
    def __init__(self, enum_name: str, text: str):
        super().__init__(f"{text!r} is not a valid {enum_name}")
        self.enum_name = enum_name
        self.text = text
