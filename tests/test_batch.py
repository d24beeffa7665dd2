import json
import math

import pytest

from staffrec.batch import download_csv, process_batch, results_frame, summarize_batch
from staffrec.errors import EmptyBatchError, NoResultsError
from staffrec.heuristic import predict_continuous
from staffrec.io import parse_csv
from staffrec.staffing import RoundingPolicy


def test_empty_batch_raises():
    with pytest.raises(EmptyBatchError) as exc:
        process_batch([], RoundingPolicy())
    assert exc.value.message.startswith("Upload a CSV first")

    with pytest.raises(EmptyBatchError):
        process_batch(None, RoundingPolicy())


def test_single_row_gains_computed_fields():
    rows = parse_csv("square_footage,mall_footfall\n800,5000").rows
    out = process_batch(rows, RoundingPolicy())

    expected = predict_continuous(800, 5000)
    assert out == [
        {
            "square_footage": "800",
            "mall_footfall": "5000",
            "predicted_continuous": round(expected, 3),
            "recommended_staff": math.ceil(expected),
        }
    ]
    assert out[0]["predicted_continuous"] == 2.599
    assert out[0]["recommended_staff"] == 3


def test_passthrough_columns_order_and_input_untouched():
    rows = parse_csv("store_id,sqft,footfall,region\nS1,100,0,north\nS2,10000,100000,south").rows
    out = process_batch(rows, RoundingPolicy(round_rule="floor"))

    assert [r["store_id"] for r in out] == ["S1", "S2"]
    assert list(out[0].keys()) == ["store_id", "sqft", "footfall", "region", "predicted_continuous", "recommended_staff"]
    assert "predicted_continuous" not in rows[0]


def test_missing_fields_default_to_zero():
    out = process_batch([{"store_id": "S9"}], RoundingPolicy())
    assert out[0]["predicted_continuous"] == 1.5
    assert out[0]["recommended_staff"] == 2


def test_non_numeric_gives_nan_and_no_recommendation():
    out = process_batch([{"area": "big", "footfall": "10"}], RoundingPolicy())
    assert math.isnan(out[0]["predicted_continuous"])
    assert out[0]["recommended_staff"] is None


def test_policy_is_shared_across_rows():
    rows = [{"area": "100", "footfall": "0"}, {"area": "90000", "footfall": "300000"}]
    out = process_batch(rows, RoundingPolicy(round_rule="ceil", min_staff=3, max_staff=5))
    assert [r["recommended_staff"] for r in out] == [3, 5]


def test_download_requires_results():
    with pytest.raises(NoResultsError) as exc:
        download_csv(None)
    assert exc.value.message == "No batch results to download"
    with pytest.raises(NoResultsError):
        download_csv([])


def test_download_format():
    results = [
        {"store_id": "S1", "note": 'say "hi"', "predicted_continuous": 2.599, "recommended_staff": 3},
        {"store_id": "S2", "note": "", "predicted_continuous": 1.5, "recommended_staff": None},
    ]
    text = download_csv(results)
    assert text.split("\n") == [
        "store_id,note,predicted_continuous,recommended_staff",
        '"S1","say \\"hi\\"",2.599,3',
        '"S2","",1.5,""',
    ]


def test_download_then_parse_round_trip():
    rows = parse_csv("store_id,square_footage,mall_footfall\nS1,800,5000\nS2,1200,15000").rows
    results = process_batch(rows, RoundingPolicy())

    reparsed = parse_csv(download_csv(results))
    assert reparsed.headers == list(results[0].keys())
    for before, after in zip(results, reparsed.rows):
        assert {k: json.loads(v) for k, v in after.items()} == before


def test_summarize_batch():
    rows = [
        {"sqft": "800", "footfall": "5000"},
        {"sqft": "abc", "footfall": "0"},
        {"sqft": "1200", "footfall": "15000"},
    ]
    summary = summarize_batch(process_batch(rows, RoundingPolicy()))
    assert summary.rows == 3
    assert summary.flagged_rows == 1
    assert summary.total_recommended == 7
    assert summary.mean_recommended == pytest.approx(3.5)
    assert summary.mean_continuous == pytest.approx((2.599 + 3.289) / 2)


def test_summarize_empty():
    summary = summarize_batch([])
    assert summary.rows == 0
    assert math.isnan(summary.mean_continuous)


def test_results_frame_preview_limits():
    results = [{"a": i, "b": i * 2, "c": i * 3} for i in range(10)]
    df = results_frame(results, max_rows=6, max_columns=2)
    assert list(df.columns) == ["a", "b"]
    assert len(df) == 6
    assert results_frame([]).empty


def test_non_finite_rows_download_as_valid_json():
    rows = parse_csv("store_id,area,footfall\nS1,big,10\nS2,1e999,0\nS3,800,5000").rows
    results = process_batch(rows, RoundingPolicy())

    text = download_csv(results)
    assert "NaN" not in text
    assert "Infinity" not in text

    def strict(token):
        raise ValueError(token)

    reparsed = parse_csv(text)
    decoded = [{k: json.loads(v, parse_constant=strict) for k, v in r.items()} for r in reparsed.rows]
    assert [r["predicted_continuous"] for r in decoded] == ["", "", 2.599]
    assert [r["recommended_staff"] for r in decoded] == ["", "", 3]


def test_whole_number_estimate_written_without_decimal():
    results = process_batch([{"area": "0", "footfall": "10000"}], RoundingPolicy())
    assert results[0]["predicted_continuous"] == 2.0

    text = download_csv(results)
    assert text.split("\n")[1] == '"0","10000",2,2'


def test_summarize_batch_ignores_infinite_rows():
    rows = parse_csv("sqft,footfall\n1e999,0\ninf,0\n800,5000").rows
    results = process_batch(rows, RoundingPolicy())
    assert [r["recommended_staff"] for r in results] == [None, None, 3]

    summary = summarize_batch(results)
    assert summary.flagged_rows == 2
    assert summary.total_recommended == 3
    assert summary.mean_continuous == pytest.approx(2.599)
    assert math.isfinite(summary.mean_continuous)
