from typing import Any


class HTTPStatusError(Exception):
    __slots__ = ()
    ...


class UnknownStatusError(HTTPStatusError, LookupError):
    "Raised by the strict lookups when a code or name is not in the registry"

    def __init__(self, key: Any) -> None:
        super().__init__(f"Unknown status {key!r}")
        self.key = key
