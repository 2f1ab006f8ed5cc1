from __future__ import annotations

import csv
import io
import json

from app_cli import score_file
from psych_core import audit_catalog
from psych_core.engine import score_responses
from psych_core.export import to_csv, to_json
from psych_core.types import ResponseSet
from tests.conftest import build_catalog, write_catalog


def test_csv_has_fixed_header(catalog):
    res = score_responses(ResponseSet(answers={"O1": 5, "O1b": 5}), catalog)
    text = to_csv([("r1", res)])
    rows = list(csv.DictReader(io.StringIO(text)))
    assert list(rows[0].keys()) == [
        "respondent", "O", "C", "E", "A", "N", "type", "confidence", "archetype", "inconsistencies",
    ]
    assert rows[0]["respondent"] == "r1"
    assert rows[0]["O"] == "3.00"
    assert rows[0]["inconsistencies"] == "O1/O1b"


def test_to_json_marks_ok(catalog):
    out = to_json(score_responses(ResponseSet(), catalog))
    assert out["ok"] is True
    json.dumps(out)


def test_score_batch_skips_bad_lines():
    lines = [
        json.dumps({"id": "a", "answers": {"O1": 5, "O1b": 5}}),
        "{broken",
        "",
        json.dumps({"email": "b@example.com"}),
    ]
    out = score_file.score_batch(lines)
    assert [rid for rid, _ in out] == ["a", "b@example.com"]
    assert out[0][1].inconsistencies == ["O1/O1b"]


def test_score_file_batch_writes_csv(tmp_path):
    src = tmp_path / "in.jsonl"
    src.write_text(json.dumps({"id": "x", "conditionPreference": "new"}) + "\n", encoding="utf-8")
    dest = tmp_path / "out.csv"
    assert score_file.main([str(src), "--batch", "--out", str(dest)]) == 0
    rows = list(csv.DictReader(io.StringIO(dest.read_text(encoding="utf-8"))))
    assert rows[0]["O"] == "3.32"


def test_score_file_single_payload(tmp_path, capsys):
    src = tmp_path / "one.json"
    src.write_text(json.dumps({"answers": {"E1": 5}}), encoding="utf-8")
    assert score_file.main([str(src)]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["ok"] is True
    assert out["scores"]["E"] == 3.67


def test_audit_bundled_catalog_clean(capsys):
    assert audit_catalog.main([]) == 0
    assert "No warnings." in capsys.readouterr().out


def test_audit_flags_thin_dimensions():
    cat = build_catalog(dimensions=("O", "C"), per_dimension=1, with_pairs=False, with_visual=False)
    summary = audit_catalog.audit_items(cat.list_all())
    joined = "\n".join(summary["warnings"])
    assert "E has no scale items" in joined
    assert "O has 1 scale items" in joined
    assert "O has no reverse-keyed item" in joined
    assert "no visual slider item" in joined
    assert summary["totals"]["scale"] == 2


def test_audit_counts_pairs(small_catalog):
    summary = audit_catalog.audit_items(small_catalog.list_all())
    assert summary["coverage"]["O"]["control_pairs"] == 1
    assert summary["totals"]["control_pairs"] == 5
    assert summary["warnings"] == []


def test_audit_reports_invalid_catalog(tmp_path, capsys):
    path = write_catalog(tmp_path / "bad.json", [{"id": "A", "dimension": "O", "control_pair": "B"}])
    out = tmp_path / "summary.json"
    assert audit_catalog.main(["--catalog", str(path), "--out", str(out)]) == 1
    assert "Catalog invalid" in capsys.readouterr().out
    assert not out.exists()
