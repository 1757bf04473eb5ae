# (c) Nelen & Schuurmans

from pydantic import ValidationError
from pydantic_core import ErrorDetails

__all__ = ["BadRequest", "InvalidArgument", "InvalidRange"]


class BadRequest(Exception):
    def __init__(self, err_or_msg: ValidationError | str):
        self._internal_error = err_or_msg
        super().__init__(err_or_msg)

    def errors(self) -> list[ErrorDetails]:
        if isinstance(self._internal_error, ValidationError):
            return self._internal_error.errors()
        return [
            ErrorDetails(
                type="value_error",
                msg=self._internal_error,
                loc=[],  # type: ignore
                input=None,
            )
        ]

    def __str__(self) -> str:
        error = self._internal_error
        if isinstance(error, ValidationError):
            details = error.errors()[0]
            loc = "'" + ",".join([str(x) for x in details["loc"]]) + "' "
            if loc == "'*' ":
                loc = ""
            return f"validation error: {loc}{details['msg']}"
        return super().__str__()


class InvalidArgument(BadRequest):
    """A required argument was missing (None)."""

    def __init__(self, name: str, msg: str = "is required"):
        self.name = name
        super().__init__(f"{name} {msg}")


class InvalidRange(BadRequest):
    """A numeric argument was outside of its allowed range."""

    def __init__(self, name: str, value: object, msg: str = "must be positive"):
        self.name = name
        self.value = value
        super().__init__(f"{name} {msg}, got {value!r}")
