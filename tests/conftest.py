from pathlib import Path

import pytest

SAMPLE_CSV = (
    "Headcount,Enrollment Ratio,Review Type,Program ID,Program Title,Fall 2020,"
    "Metrics Met,2122,CIP,Faculty Ratio Score,1920,Completion Pct\n"
    "120,50%,Comprehensive,101,Art,99,3,45,50.0701,1.5,88,60%\n"
    "300,75%,Annual,102,Biology,99,4,80,26.0101,2.0,88,70%\n"
    "95,40%,Comprehensive,103,General Studies,99,2,30,01.0101,,88,55%\n"
)

EXPECTED_ORDER = [
    "Program Title",
    "Program ID",
    "CIP",
    "Review Type",
    "Metrics Met",
    "Enrollment Ratio",
    "Faculty Ratio Score",
    "Headcount",
    "2122",
    "Completion Pct",
]


@pytest.fixture
def sample_csv(tmp_path) -> Path:
    path = tmp_path / "Final.csv"
    path.write_text(SAMPLE_CSV)
    return path


@pytest.fixture
def sample_rows():
    header, *lines = SAMPLE_CSV.strip().split("\n")
    keys = header.split(",")
    return [dict(zip(keys, line.split(","))) for line in lines]
