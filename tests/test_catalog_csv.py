# tests/test_catalog_csv.py
import json

import pandas as pd
import pytest

from engine.errors import ConfigurationError
from engine.splitter import BasketSplitter
from inputs.scripts.build_catalog_from_csv import build_catalog, load_catalog_csv


def write_rows(path, rows, columns=("item_id", "method")):
    pd.DataFrame(rows, columns=list(columns)).to_csv(path, index=False)


def test_csv_rows_become_catalog_in_file_order(tmp_path):
    csv_path = tmp_path / "catalog.csv"
    write_rows(csv_path, [
        ("Apple", "Courier"),
        ("Milk", "Express"),
        ("Apple", "Express"),
        ("Bread", "Courier"),
    ])
    assert load_catalog_csv(str(csv_path)) == {
        "Apple": ["Courier", "Express"],
        "Milk": ["Express"],
        "Bread": ["Courier"],
    }


def test_build_catalog_writes_json_the_splitter_accepts(tmp_path):
    csv_path = tmp_path / "catalog.csv"
    out_path = tmp_path / "config" / "catalog.json"
    write_rows(csv_path, [("Apple", "Courier"), ("Apple", "Express"), ("Milk", "Express")])

    build_catalog(str(csv_path), str(out_path))

    with open(out_path, encoding="utf-8") as f:
        assert json.load(f) == {"Apple": ["Courier", "Express"], "Milk": ["Express"]}
    assert BasketSplitter(str(out_path)).split(["Apple", "Milk"]) == {"Express": ["Apple", "Milk"]}


def test_missing_csv_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_catalog_csv(str(tmp_path / "absent.csv"))


def test_missing_columns(tmp_path):
    csv_path = tmp_path / "catalog.csv"
    write_rows(csv_path, [("Apple", "Courier")], columns=("item", "method"))
    with pytest.raises(ConfigurationError, match="missing columns"):
        load_catalog_csv(str(csv_path))


def test_duplicate_rows_rejected(tmp_path):
    csv_path = tmp_path / "catalog.csv"
    write_rows(csv_path, [("Apple", "Courier"), ("Apple", "Courier")])
    with pytest.raises(ConfigurationError, match="Duplicate"):
        load_catalog_csv(str(csv_path))


def test_blank_cells_rejected(tmp_path):
    csv_path = tmp_path / "catalog.csv"
    write_rows(csv_path, [("Apple", "Courier"), ("Milk", "")])
    with pytest.raises(ConfigurationError, match="blank"):
        load_catalog_csv(str(csv_path))
