import pytest

from blog_list_api.app.core.errors import MAX_ROW_ID, MalformedIdError, parse_id


def test_parse_id_accepts_digits():
    assert parse_id("42") == 42


def test_parse_id_accepts_largest_row_id():
    assert parse_id(str(2**63 - 1)) == MAX_ROW_ID


@pytest.mark.parametrize("raw_id", [str(2**63), "99999999999999999999"])
def test_parse_id_rejects_values_sqlite_cannot_store(raw_id):
    with pytest.raises(MalformedIdError) as excinfo:
        parse_id(raw_id)
    assert excinfo.value.raw_id == raw_id


@pytest.mark.parametrize("raw_id", ["", "-1", "1.5", "abc", "١٢"])
def test_parse_id_rejects_non_digit_strings(raw_id):
    with pytest.raises(MalformedIdError):
        parse_id(raw_id)
