from concurrent.futures.thread import ThreadPoolExecutor
from http import HTTPStatus

import pytest
from msgspec import json

from httpstatus import (
    STATUS_ENTRIES,
    StatusEntry,
    UnknownStatusError,
    aliases,
    code,
    entries,
    get_status_text,
    is_client_error,
    is_error,
    is_informational,
    is_redirect,
    is_server_error,
    is_status,
    is_success,
    lookup_by_code,
    lookup_by_symbolic_name,
    lookup_entry,
    phrase,
    status_class,
)
from httpstatus import status as http_status


@pytest.mark.parametrize("name, status", http_status.STATUS_CODE.items())
def test_alias_consistency(name: str, status: int):
    assert lookup_by_symbolic_name(name) == status
    assert get_status_text(name) == get_status_text(status)


def test_end_to_end_scenarios():
    assert get_status_text(404) == "Not Found"
    assert get_status_text("NOT_FOUND") == "Not Found"
    assert lookup_by_symbolic_name("OK") == 200
    assert get_status_text(418) == "I'm a teapot"
    assert get_status_text(999) is None

    legal = lookup_by_code(451)
    assert legal is not None
    assert "Unavailable For Legal Reasons" in legal
    assert "Redirect" in legal


@pytest.mark.parametrize(
    "names, status",
    [
        (("METHOD_FAILURE", "ENHANCE_YOUR_CALM"), 420),
        (("UNAVAILABLE_FOR_LEGAL_REASONS", "REDIRECT"), 451),
        (("TOKEN_EXPIRED", "TOKEN_INVALID"), 498),
        (("CLIENT_CLOSED_REQUEST", "TOKEN_REQUIRED"), 499),
    ],
)
def test_dual_aliases(names: tuple[str, str], status: int):
    first, second = names
    assert lookup_by_symbolic_name(first) == lookup_by_symbolic_name(second) == status
    assert get_status_text(first) == get_status_text(second)
    assert aliases(status) == names


def test_negative_lookups():
    assert lookup_by_code(999) is None
    assert lookup_by_code(450 + 1000) is None
    assert lookup_by_code(421) is None
    assert lookup_by_symbolic_name("NOT_A_REAL_STATUS") is None
    assert get_status_text("NOT_A_REAL_STATUS") is None
    assert aliases(999) == ()
    assert lookup_entry(999) is None


def test_boundaries():
    assert get_status_text(100) == "Continue"
    assert get_status_text(599) == "Network connect timeout error (Unknown)"
    assert get_status_text(99) is None
    assert get_status_text(600) is None


def test_symbolic_names_are_case_sensitive():
    assert lookup_by_symbolic_name("not_found") is None
    assert lookup_by_symbolic_name("Not_Found") is None
    assert get_status_text("ok") is None


def test_numeric_strings_resolve_as_codes():
    assert get_status_text("404") == "Not Found"
    assert get_status_text("599") == get_status_text(599)
    assert get_status_text("999") is None
    assert get_status_text(" 404") is None
    assert get_status_text("404.0") is None
    assert get_status_text("-404") is None


@pytest.mark.parametrize("key", ["0404", "00404", "4" * 5000, "1" + "0" * 4400, "4040"])
def test_malformed_numeric_strings_are_not_found(key: str):
    "oversized or zero padded digit strings never reach int() and never raise"
    assert get_status_text(key) is None
    assert lookup_entry(key) is None
    with pytest.raises(UnknownStatusError):
        phrase(key)


def test_lookup_by_code_does_not_coerce():
    assert lookup_by_code("404") is None  # type: ignore
    assert lookup_by_code(404.0) is None  # type: ignore


@pytest.mark.parametrize("key", [None, 404.0, True, False, b"404", [404], (404,), {}])
def test_unsupported_keys_are_not_found(key: object):
    assert get_status_text(key) is None  # type: ignore
    assert lookup_entry(key) is None  # type: ignore
    assert lookup_by_symbolic_name(key) is None  # type: ignore


def test_http_status_members_resolve_by_value():
    assert get_status_text(HTTPStatus.NOT_FOUND) == "Not Found"
    assert lookup_by_code(HTTPStatus.IM_A_TEAPOT) == "I'm a teapot"


def test_lookups_are_idempotent():
    first = [get_status_text(key) for key in (404, "NOT_FOUND", "404", 999)]
    for _ in range(3):
        assert [get_status_text(key) for key in (404, "NOT_FOUND", "404", 999)] == first
    assert lookup_entry(404) is lookup_entry("NOT_FOUND")


def test_concurrent_lookups():
    workers = ThreadPoolExecutor(max_workers=8)
    keys = list(http_status.STATUS_TEXT) + list(http_status.STATUS_CODE)

    with workers:
        results = list(workers.map(get_status_text, keys * 20))

    assert results == [get_status_text(key) for key in keys] * 20


class TestStatusEntry:
    def test_entries_ordered_by_code(self):
        codes = [entry.code for entry in entries()]
        assert codes == sorted(http_status.STATUS_TEXT)
        assert entries() == tuple(STATUS_ENTRIES.values())

    def test_every_entry_has_a_name(self):
        for entry in entries():
            assert entry.names
            for name in entry.names:
                assert http_status.STATUS_CODE[name] == entry.code

    def test_lookup_entry(self):
        entry = lookup_entry("NOT_FOUND")
        assert entry is not None
        assert entry.code == 404
        assert entry.names == ("NOT_FOUND",)
        assert entry.phrase == "Not Found"
        assert entry.category == "client_error"
        assert str(entry) == "404 Not Found"
        assert lookup_entry("404") == entry

    def test_entry_is_frozen(self):
        entry = STATUS_ENTRIES[200]
        with pytest.raises(AttributeError):
            entry.phrase = "Fine"  # type: ignore

        changed = entry.replace(phrase="Fine")
        assert changed.phrase == "Fine"
        assert STATUS_ENTRIES[200].phrase == "OK"

    def test_entry_mapping_interface(self):
        entry = STATUS_ENTRIES[420]
        assert entry.keys() == ("code", "names", "phrase")
        assert entry["code"] == 420
        assert len(entry) == 3
        assert dict(entry) == entry.asdict()
        assert entry.asdict() == {
            "code": 420,
            "names": ("METHOD_FAILURE", "ENHANCE_YOUR_CALM"),
            "phrase": "Method Failure (Spring Framework) / Enhance Your Calm (Twitter)",
        }

    def test_entry_is_hashable(self):
        assert len({STATUS_ENTRIES[404], lookup_entry(404)}) == 1

    def test_entry_encodes_to_json(self):
        data = json.encode(STATUS_ENTRIES[498])
        assert json.decode(data) == {
            "code": 498,
            "names": ["TOKEN_EXPIRED", "TOKEN_INVALID"],
            "phrase": "Token expired/invalid (Esri)",
        }
        assert json.decode(data, type=StatusEntry) == STATUS_ENTRIES[498]


class TestClassification:
    @pytest.mark.parametrize(
        "status, expected",
        [
            (100, "informational"),
            (199, "informational"),
            (200, "success"),
            (308, "redirection"),
            (404, "client_error"),
            (421, "client_error"),
            (599, "server_error"),
        ],
    )
    def test_status_class(self, status: int, expected: str):
        assert status_class(status) == expected

    @pytest.mark.parametrize("status", [0, 99, 600, 999, -404])
    def test_out_of_range(self, status: int):
        assert status_class(status) is None
        assert not is_error(status)

    def test_non_int_is_unclassified(self):
        assert status_class("404") is None  # type: ignore
        assert status_class(True) is None  # type: ignore

    def test_predicates(self):
        assert is_informational(http_status.CONTINUE)
        assert is_success(http_status.OK)
        assert is_redirect(http_status.FOUND)
        assert is_client_error(http_status.ENHANCE_YOUR_CALM)
        assert is_server_error(http_status.A_TIMEOUT_OCCURRED)
        assert is_error(http_status.NOT_FOUND)
        assert is_error(http_status.BAD_GATEWAY)
        assert not is_error(http_status.OK)
        assert not is_success(http_status.NO_RESPONSE)

    def test_entry_categories_match(self):
        for entry in entries():
            assert entry.category == status_class(entry.code)

    def test_is_status(self):
        assert is_status(404)
        assert is_status(599)
        assert not is_status(421)
        assert not is_status("404")
        assert not is_status(True)


class TestStrictLookups:
    def test_phrase(self):
        assert phrase(404) == "Not Found"
        assert phrase("NOT_FOUND") == "Not Found"

    def test_code(self):
        assert code("I_AM_A_TEAPOT") == 418
        assert code("REDIRECT") == 451

    def test_phrase_unknown(self):
        with pytest.raises(UnknownStatusError) as exc_info:
            phrase(999)
        assert str(exc_info.value) == "Unknown status 999"
        assert exc_info.value.key == 999

    def test_code_unknown(self):
        with pytest.raises(LookupError):
            code("NOT_A_REAL_STATUS")

        with pytest.raises(UnknownStatusError) as exc_info:
            code("not_found")
        assert str(exc_info.value) == "Unknown status 'not_found'"
