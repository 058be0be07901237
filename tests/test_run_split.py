# tests/test_run_split.py
import json

import pandas as pd

from engine.report import grouping_frame, grouping_summary, method_coverage
from engine.catalog import Catalog
from scripts.run_split import main


CFG = {
    "Apple": ["Courier", "Express"],
    "Milk": ["Express"],
    "Bread": ["Courier"],
    "Chair": ["Courier"],
}


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_cli_writes_json_and_csv(tmp_path, capsys):
    config = _write(tmp_path / "catalog.json", CFG)
    basket = _write(tmp_path / "basket.json", ["Apple", "Milk", "Bread", "Chair"])
    outdir = tmp_path / "out"

    rc = main(["--config", config, "--basket", basket, "--outdir", str(outdir)])
    assert rc == 0

    with open(outdir / "split_result.json", encoding="utf-8") as f:
        result = json.load(f)
    assert result == {"Courier": ["Apple", "Bread", "Chair"], "Express": ["Milk"]}

    df = pd.read_csv(outdir / "split_result.csv")
    assert list(df.columns) == ["method", "item", "line"]
    assert len(df) == 4
    out = capsys.readouterr().out
    assert "[ok] wrote" in out
    # catalog coverage and per-method entry counts are printed
    assert "Methods in catalog" in out
    assert "  Courier: 3" in out
    assert "  Express: 2" in out
    assert "entries" in out and "distinct_items" in out


def test_cli_reports_unavailable_item(tmp_path, capsys):
    config = _write(tmp_path / "catalog.json", CFG)
    basket = _write(tmp_path / "basket.json", ["Apple", "Caviar"])

    rc = main(["--config", config, "--basket", basket, "--outdir", str(tmp_path / "out")])
    assert rc == 1
    assert "Caviar" in capsys.readouterr().out
    assert not (tmp_path / "out" / "split_result.json").exists()


def test_cli_reports_broken_catalog(tmp_path, capsys):
    config = tmp_path / "catalog.json"
    config.write_text("not json", encoding="utf-8")
    basket = _write(tmp_path / "basket.json", ["Apple"])

    rc = main(["--config", str(config), "--basket", basket, "--outdir", str(tmp_path / "out")])
    assert rc == 1
    assert "[ERROR]" in capsys.readouterr().out


def test_grouping_summary_orders_by_size():
    grouping = {"Express": ["Milk"], "Courier": ["Apple", "Bread", "Apple"]}
    summary = grouping_summary(grouping)
    assert summary["method"].tolist() == ["Courier", "Express"]
    assert summary["entries"].tolist() == [3, 1]
    assert summary["distinct_items"].tolist() == [2, 1]


def test_empty_grouping_frames():
    assert grouping_frame({}).empty
    assert grouping_summary({}).empty


def test_method_coverage():
    assert method_coverage(Catalog(CFG)) == {"Courier": 3, "Express": 2}


def test_cli_reports_undecodable_basket(tmp_path, capsys):
    config = _write(tmp_path / "catalog.json", CFG)
    basket = tmp_path / "basket.json"
    basket.write_bytes(b'["\xff\xfe"]')

    rc = main(["--config", config, "--basket", str(basket), "--outdir", str(tmp_path / "out")])
    assert rc == 1
    assert "[ERROR]" in capsys.readouterr().out


def test_cli_reports_basket_directory(tmp_path, capsys):
    config = _write(tmp_path / "catalog.json", CFG)
    basket_dir = tmp_path / "baskets"
    basket_dir.mkdir()

    rc = main(["--config", config, "--basket", str(basket_dir), "--outdir", str(tmp_path / "out")])
    assert rc == 1
    assert "[ERROR]" in capsys.readouterr().out
