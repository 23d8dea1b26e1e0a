"""
CSV loading and DataStore snapshot tests.
"""
import pytest

from program_review.data.loader import load_rows, rows_from_bytes
from program_review.data.store import DataStore

from conftest import EXPECTED_ORDER, SAMPLE_CSV


class TestLoadRows:

    def test_every_cell_is_text(self, sample_csv):
        rows = load_rows(sample_csv)
        assert len(rows) == 3
        assert rows[0]["Headcount"] == "120"
        assert rows[0]["CIP"] == "50.0701"
        assert rows[2]["CIP"] == "01.0101"
        assert all(isinstance(v, str) for row in rows for v in row.values())

    def test_blank_cells_are_empty_strings(self, sample_csv):
        rows = load_rows(sample_csv)
        assert rows[2]["Faculty Ratio Score"] == ""

    def test_na_markers_are_not_converted(self, tmp_path):
        path = tmp_path / "na.csv"
        path.write_text("Program Title,Note\nArt,NA\nBio,null\n")
        assert load_rows(path) == [
            {"Program Title": "Art", "Note": "NA"},
            {"Program Title": "Bio", "Note": "null"},
        ]

    def test_missing_file_gives_no_rows(self, tmp_path):
        assert load_rows(tmp_path / "missing.csv") == []

    def test_empty_file_gives_no_rows(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("")
        assert load_rows(path) == []

    def test_header_only(self, tmp_path):
        path = tmp_path / "header.csv"
        path.write_text("Program Title,Headcount\n")
        assert load_rows(path) == []

    def test_non_utf8_file_gives_no_rows(self, tmp_path):
        path = tmp_path / "latin1.csv"
        path.write_bytes("Program Title,Headcount\nEspa\xf1ol,5\n".encode("latin-1"))
        assert load_rows(path) == []

    def test_malformed_file_gives_no_rows(self, tmp_path):
        path = tmp_path / "ragged.csv"
        path.write_text("a,b\n1,2\n3,4,5,6\n")
        assert load_rows(path) == []


class TestRowsFromBytes:

    def test_parses_utf8_with_bom(self):
        rows = rows_from_bytes("\ufeffProgram Title,Headcount\nArt,5\n".encode("utf-8"))
        assert rows == [{"Program Title": "Art", "Headcount": "5"}]

    def test_same_rows_as_file(self, sample_csv):
        assert rows_from_bytes(SAMPLE_CSV.encode()) == load_rows(sample_csv)

    @pytest.mark.parametrize(
        "content",
        [b"", b"   \n", b"\xff\xfe\xfa", b"a,b\n1,2\n3,4,5,6\n"],
    )
    def test_rejects_unusable_content(self, content):
        with pytest.raises(ValueError):
            rows_from_bytes(content)


class TestDataStore:

    def test_load(self, sample_csv):
        store = DataStore(sample_csv).load()
        assert store.is_loaded
        assert store.row_count() == 3
        assert store.column_count() == len(EXPECTED_ORDER)
        assert store.view.fields == EXPECTED_ORDER
        assert store.raw_rows[0]["Headcount"] == "120"
        assert store.rows[0]["Headcount"] == 120

    def test_not_loaded_until_load(self, sample_csv):
        store = DataStore(sample_csv)
        assert not store.is_loaded
        assert store.row_count() == 0
        assert store.column_count() == 0

    def test_missing_dataset_loads_empty(self, tmp_path):
        store = DataStore(tmp_path / "Final.csv").load()
        assert store.is_loaded
        assert store.row_count() == 0
        assert store.view.columns == []

    def test_reload_rederives_plan(self, sample_csv):
        store = DataStore(sample_csv).load()
        sample_csv.write_text("Program Title,Student Ratio\nArt,3\n")
        store.load()
        assert store.view.fields == ["Program Title", "Student Ratio"]
        assert store.rows == [{"Program Title": "Art", "Student Ratio": 3}]

    def test_load_rows_replaces_snapshot(self, sample_csv):
        store = DataStore(sample_csv).load()
        store.load_rows([{"Program Title": "Only"}])
        assert store.row_count() == 1
        assert store.view.fields == ["Program Title"]
