import io
from pathlib import Path

import pytest
from rich.console import Console

import pandas as pd
from nnumber.core.registers import Registers, icao24, registration


def test_series() -> None:
    s = pd.Series(["a00001", "A00C22", "3c6444", None], index=[3, 4, 5, 6])
    result = registration(s)
    assert result.name == "registration"
    assert result.index.tolist() == [3, 4, 5, 6]
    assert result.tolist() == ["N1", "N102A", None, None]

    result = icao24(pd.Series(["N1", "N102A", "F-HNAV"]))
    assert result.tolist() == ["a00001", "a00c22", None]


def test_from_icao24() -> None:
    r = Registers.from_icao24(["A00001", "adf7c7", "3c6444"])
    assert len(r) == 3
    assert r.data.columns.tolist() == ["icao24", "registration"]
    assert r.data.icao24.tolist() == ["a00001", "adf7c7", "3c6444"]
    assert len(r.valid) == 2
    assert r.invalid.data.icao24.tolist() == ["3c6444"]


def test_from_registration() -> None:
    r = Registers.from_registration(["N1", "N9A", "NA1"])
    assert r.data.icao24.tolist() == ["a00001", "ac6a7a", None]
    assert r.invalid.data.registration.tolist() == ["NA1"]
    assert r.source == "registration"


def test_getitem() -> None:
    r = Registers.from_registration(["N1", "N99999"])
    assert r["ADF7C7"] == {"icao24": "adf7c7", "registration": "N99999"}
    assert r["N1"] == {"icao24": "a00001", "registration": "N1"}
    assert r["N2"] is None
    assert r["a00002"] is None


def test_missing_columns() -> None:
    with pytest.raises(ValueError):
        Registers(pd.DataFrame({"callsign": ["AFR123"]}))


def test_extra_columns() -> None:
    df = pd.DataFrame(
        {"typecode": ["C172", "B738"], "registration": ["N1", "N9A"]}
    )
    r = Registers(df)
    assert r.data.columns.tolist() == ["icao24", "registration", "typecode"]
    assert r.assign(typecode="A320").data.typecode.tolist() == ["A320"] * 2
    subset = r.query('typecode == "B738"')
    assert subset is not None
    assert subset.data.icao24.tolist() == ["ac6a7a"]
    assert r.query('typecode == "A388"') is None


def test_from_file(tmp_path: Path) -> None:
    csv_file = tmp_path / "aircraft.csv"
    csv_file.write_text("icao24,typecode\na00c22,C172\nadf7c7,B738\nzzz,\n")
    r = Registers.from_file(csv_file)
    assert r.data.registration.tolist() == ["N102A", "N99999", None]

    json_file = tmp_path / "aircraft.json"
    r.valid.to_json(json_file, orient="records")
    r = Registers.from_file(json_file)
    assert r.data.registration.tolist() == ["N102A", "N99999"]

    csv_file = tmp_path / "registrations.csv"
    r.to_csv(csv_file, index=False)
    r = Registers.from_file(csv_file)
    assert r.source == "icao24"
    assert r.data.columns.tolist() == ["icao24", "registration", "typecode"]
    assert r.data.typecode.tolist() == ["C172", "B738"]

    with pytest.raises(FileNotFoundError):
        Registers.from_file(tmp_path / "aircraft.txt")


def test_representation() -> None:
    r = Registers.from_registration([f"N{i}" for i in range(1, 13)] + ["NA1"])

    console = Console(file=io.StringIO(), width=80)
    console.print(r)
    output = console.file.getvalue()  # type: ignore
    assert "icao24" in output and "registration" in output
    assert "a00001" in output
    assert "(3 more entries)" in output

    assert "a00001" in r._repr_html_()
