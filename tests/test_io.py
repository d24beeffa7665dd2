import io

import pytest

from staffrec.errors import CSVParseError
from staffrec.io import AREA_ALIASES, FOOTFALL_ALIASES, parse_csv, read_batch_upload, resolve_field


def test_parse_basic_with_crlf_and_blank_lines():
    text = "store_id, square_footage ,mall_footfall\r\nS1, 800 ,5000\r\n\r\nS2,1200,15000\n"
    parsed = parse_csv(text)
    assert parsed.headers == ["store_id", "square_footage", "mall_footfall"]
    assert parsed.rows == [
        {"store_id": "S1", "square_footage": "800", "mall_footfall": "5000"},
        {"store_id": "S2", "square_footage": "1200", "mall_footfall": "15000"},
    ]


def test_parse_empty():
    parsed = parse_csv("")
    assert parsed.headers == []
    assert parsed.rows == []
    assert parse_csv("\n\r\n").rows == []


def test_short_rows_padded_and_extra_fields_dropped():
    parsed = parse_csv("a,b,c\n1\n1,2,3,4,5")
    assert parsed.rows == [{"a": "1", "b": "", "c": ""}, {"a": "1", "b": "2", "c": "3"}]


def test_quoted_commas_still_split():
    parsed = parse_csv('name,sqft\n"Store, North",900')
    assert parsed.rows == [{"name": '"Store', "sqft": 'North"'}]


def test_read_upload_bytes_with_bom():
    parsed = read_batch_upload(io.BytesIO("\ufeffsqft,footfall\n10,20\n".encode("utf-8")))
    assert parsed.headers == ["sqft", "footfall"]
    assert parsed.rows == [{"sqft": "10", "footfall": "20"}]


def test_read_upload_text():
    assert read_batch_upload("area\n5").rows == [{"area": "5"}]


def test_read_upload_rejects_binary():
    with pytest.raises(CSVParseError) as exc:
        read_batch_upload(b"\xff\xfe\x00\x81garbage")
    assert exc.value.message == "Failed to parse CSV"


def test_resolve_field_priority():
    row = {"sqft": "300", "area": "200", "SQUARE_FOOTAGE": "400"}
    assert resolve_field(row, AREA_ALIASES) == "200"
    # Present-but-empty still wins
    assert resolve_field({"square_footage": "", "area": "9"}, AREA_ALIASES) == ""
    assert resolve_field({"Mall_Footfall": "9"}, FOOTFALL_ALIASES) is None
    assert resolve_field({"mallTraffic": "7"}, FOOTFALL_ALIASES) == "7"
