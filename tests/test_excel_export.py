"""
Spreadsheet export tests — read the workbook back with openpyxl.
"""
from openpyxl import load_workbook

from program_review.data.store import DataStore
from program_review.excel.writer import ExcelWriter
from program_review.planner.columns import plan_grid
from program_review.reports import grid_report

from conftest import EXPECTED_ORDER

HEADER_ROW = 4


def _export(tmp_path, view):
    path = grid_report.generate_excel(view, tmp_path / "out" / "review.xlsx")
    return path, load_workbook(path).active


def test_export_writes_headers_in_display_order(tmp_path, sample_csv):
    store = DataStore(sample_csv).load()
    path, ws = _export(tmp_path, store.view)

    assert path.exists()
    assert ws.title == "Program Review"
    assert ws.cell(row=1, column=1).value == "Program Review"
    headers = [ws.cell(row=HEADER_ROW, column=i).value for i in range(1, len(EXPECTED_ORDER) + 1)]
    assert headers == [c.header_name for c in store.view.columns]
    assert headers[0] == "Program Title"
    assert "AY 2021-22" in headers


def test_export_values_match_display_rows(tmp_path, sample_csv):
    store = DataStore(sample_csv).load()
    _, ws = _export(tmp_path, store.view)

    fields = store.view.fields
    first = {f: ws.cell(row=HEADER_ROW + 1, column=i).value for i, f in enumerate(fields, 1)}
    assert first["Program Title"] == "Art"
    assert first["Headcount"] == 120
    assert first["Enrollment Ratio"] == "50%"
    assert first["CIP"] == "50.0701"

    gs_review = ws.cell(row=HEADER_ROW + 3, column=fields.index("Review Type") + 1).value
    assert gs_review == "Not Reviewed"
    assert ws.cell(row=HEADER_ROW + 3, column=fields.index("Faculty Ratio Score") + 1).value in (None, "")


def test_export_alignment_and_freeze(tmp_path, sample_csv):
    store = DataStore(sample_csv).load()
    _, ws = _export(tmp_path, store.view)

    fields = store.view.fields
    data_row = HEADER_ROW + 1
    assert ws.cell(row=data_row, column=fields.index("Headcount") + 1).alignment.horizontal == "right"
    assert ws.cell(row=data_row, column=fields.index("Program ID") + 1).alignment.horizontal == "left"
    assert ws.freeze_panes == f"B{HEADER_ROW + 1}"
    assert ws.auto_filter.ref.startswith(f"A{HEADER_ROW}:")


def test_missing_cells_are_blank(tmp_path):
    view = plan_grid([{"Program Title": "Art", "Headcount": "3"}, {"Program Title": "Bio"}])
    _, ws = _export(tmp_path, view)
    assert ws.cell(row=HEADER_ROW + 2, column=2).value is None


def test_add_sheet_reuses_default_then_creates():
    ew = ExcelWriter()
    first = ew.add_sheet("A" * 40)
    second = ew.add_sheet("Second")
    assert first.title == "A" * 31
    assert ew.wb.sheetnames == ["A" * 31, "Second"]
    assert second is ew.wb["Second"]


def test_generate_json_shape(sample_csv):
    store = DataStore(sample_csv).load()
    data = grid_report.generate_json(store.view)
    assert data["title"] == "Program Review"
    assert [d["field"] for d in data["columnDefs"]] == EXPECTED_ORDER
    assert len(data["rowData"]) == 3
