"""Parse User Input: unsigned 32-bit parsing and form validation.

Tests:
    - parse_uint32 accepts 0..UINT32_MAX written as plain ASCII digits
    - Signs, whitespace, separators, non-ASCII digits and empties are rejected
    - Creation requires name, email and a valid age
    - Update treats empty/absent fields as "unchanged" and validates age before returning
"""

import pytest

from users_api.core.domain_types import UINT32_MAX
from users_api.core.errors import MalformedInputError
from users_api.core.parse_user_input import (
    UserDraft, UserPatch,
    parse_uint32, parse_user_draft, parse_user_id, parse_user_patch,
)


@pytest.mark.parametrize("raw,expected", [
    ("0", 0),
    ("30", 30),
    ("007", 7),
    ("4294967295", UINT32_MAX),
])
def test_parse_uint32_accepts_valid(raw, expected):
    assert parse_uint32(raw, "age") == expected


@pytest.mark.parametrize("raw", [
    None, "", "abc", "-1", "+5", " 5", "5 ", "1_000", "3.0", "1e3",
    "4294967296", "99999999999999999999", "٥",
])
def test_parse_uint32_rejects_malformed(raw):
    with pytest.raises(MalformedInputError) as exc:
        parse_uint32(raw, "age")
    assert exc.value.field == "age"
    assert exc.value.value == raw
    assert exc.value.http_status == 400


def test_parse_user_id_reports_id_field():
    assert parse_user_id("12") == 12
    with pytest.raises(MalformedInputError) as exc:
        parse_user_id("twelve")
    assert exc.value.field == "id"


def test_parse_user_draft_valid():
    draft = parse_user_draft({"name": "Ann", "email": "a@x.com", "age": "30"})
    assert draft == UserDraft(name="Ann", email="a@x.com", age=30)


def test_parse_user_draft_does_not_check_email_format():
    draft = parse_user_draft({"name": "Ann", "email": "not-an-email", "age": "1"})
    assert draft.email == "not-an-email"


@pytest.mark.parametrize("form,field", [
    ({"name": "Ann", "email": "a@x.com"}, "age"),
    ({"name": "Ann", "email": "a@x.com", "age": "x"}, "age"),
    ({"email": "a@x.com", "age": "30"}, "name"),
    ({"name": "", "email": "a@x.com", "age": "30"}, "name"),
    ({"name": "Ann", "age": "30"}, "email"),
    ({"name": "Ann", "email": "", "age": "30"}, "email"),
])
def test_parse_user_draft_rejects(form, field):
    with pytest.raises(MalformedInputError) as exc:
        parse_user_draft(form)
    assert exc.value.field == field


def test_parse_user_patch_empty_form_is_empty_patch():
    patch = parse_user_patch({})
    assert patch == UserPatch()


def test_parse_user_patch_empty_strings_mean_unchanged():
    patch = parse_user_patch({"name": "", "email": "", "age": ""})
    assert patch == UserPatch()


def test_parse_user_patch_only_age():
    assert parse_user_patch({"age": "31"}) == UserPatch(age=31)


def test_parse_user_patch_all_fields():
    patch = parse_user_patch({"name": "Zoe", "email": "z@x.com", "age": "0"})
    assert patch == UserPatch(name="Zoe", email="z@x.com", age=0)


def test_parse_user_patch_bad_age_rejects_whole_patch():
    with pytest.raises(MalformedInputError) as exc:
        parse_user_patch({"name": "Zoe", "age": "-1"})
    assert exc.value.field == "age"
