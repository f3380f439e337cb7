import re
from types import MappingProxyType
from typing import Annotated, Any, Literal, Mapping, Union, cast

from typing_extensions import Doc, TypeGuard

from httpstatus.constant.status import STATUS_CODE, STATUS_TEXT, Status
from httpstatus.errors import UnknownStatusError
from httpstatus.interface import Record

"""
Lookups never raise for a missing key, they return None the same way `dict.get` does.
Only `phrase` and `code` raise, for callers that treat an unknown status as a bug.
"""

StatusKey = Union[int, str]

StatusClass = Literal[
    "informational", "success", "redirection", "client_error", "server_error"
]

STATUS_CLASSES: tuple[StatusClass, ...] = (
    "informational",
    "success",
    "redirection",
    "client_error",
    "server_error",
)
"indexed by the leading digit of a code minus one"

RE_NUMERIC = re.compile(r"[1-9][0-9]{2}")
"three digits, no leading zero"


def _is_int(value: Any) -> TypeGuard[int]:
    return isinstance(value, int) and not isinstance(value, bool)


def status_class(code: int) -> StatusClass | None:
    """
    Classify any integer in 100-599 by its leading digit, mapped or not.

    Examples:
        200 -> success
        450 -> client_error
        999 -> None
    """
    if not _is_int(code) or not 100 <= code <= 599:
        return None
    return STATUS_CLASSES[code // 100 - 1]


class StatusEntry(Record):
    code: Annotated[int, Doc("Numeric HTTP status code, 100-599")]
    names: Annotated[
        tuple[str, ...], Doc("Symbolic names aliasing this code, in table order")
    ]
    phrase: Annotated[str, Doc("Reason phrase, combined when a code is reused")]

    @property
    def category(self) -> StatusClass:
        return cast(StatusClass, status_class(self.code))

    def __str__(self) -> str:
        return f"{self.code} {self.phrase}"


def _build_entries() -> Mapping[int, StatusEntry]:
    names: dict[int, list[str]] = {}
    for name, code in STATUS_CODE.items():
        names.setdefault(code, []).append(name)

    return MappingProxyType(
        {
            code: StatusEntry(code=code, names=tuple(names.get(code, ())), phrase=text)
            for code, text in sorted(STATUS_TEXT.items())
        }
    )


STATUS_ENTRIES: Mapping[int, StatusEntry] = _build_entries()
_ALL_ENTRIES: tuple[StatusEntry, ...] = tuple(STATUS_ENTRIES.values())


def _resolve_code(key: Any) -> int | None:
    "ints and three-digit strings are codes, any other string is a symbolic name"
    if _is_int(key):
        return key
    if isinstance(key, str):
        if RE_NUMERIC.fullmatch(key):
            return int(key)
        return STATUS_CODE.get(key)
    return None


def lookup_by_code(code: int) -> str | None:
    if not _is_int(code):
        return None
    return STATUS_TEXT.get(code)


def lookup_by_symbolic_name(name: str) -> Status | None:
    if not isinstance(name, str):
        return None
    return STATUS_CODE.get(name)


def get_status_text(code_or_name: StatusKey) -> str | None:
    """
    Reason phrase for a code or a symbolic name.

    Examples:
        get_status_text(404) -> "Not Found"
        get_status_text("404") -> "Not Found"
        get_status_text("NOT_FOUND") -> "Not Found"
        get_status_text(999) -> None
    """
    code = _resolve_code(code_or_name)
    if code is None:
        return None
    return STATUS_TEXT.get(code)


def lookup_entry(code_or_name: StatusKey) -> StatusEntry | None:
    code = _resolve_code(code_or_name)
    if code is None:
        return None
    return STATUS_ENTRIES.get(code)


def aliases(code: int) -> tuple[str, ...]:
    if not _is_int(code) or (entry := STATUS_ENTRIES.get(code)) is None:
        return ()
    return entry.names


def entries() -> tuple[StatusEntry, ...]:
    return _ALL_ENTRIES


def is_status(value: Any) -> TypeGuard[Status]:
    return _is_int(value) and value in STATUS_TEXT


def is_informational(code: int) -> bool:
    return status_class(code) == "informational"


def is_success(code: int) -> bool:
    return status_class(code) == "success"


def is_redirect(code: int) -> bool:
    return status_class(code) == "redirection"


def is_client_error(code: int) -> bool:
    return status_class(code) == "client_error"


def is_server_error(code: int) -> bool:
    return status_class(code) == "server_error"


def is_error(code: int) -> bool:
    return status_class(code) in ("client_error", "server_error")


def phrase(code_or_name: StatusKey) -> str:
    if (text := get_status_text(code_or_name)) is None:
        raise UnknownStatusError(code_or_name)
    return text


def code(name: str) -> Status:
    if (status := lookup_by_symbolic_name(name)) is None:
        raise UnknownStatusError(name)
    return status
