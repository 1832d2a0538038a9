"""Test report text, gauges and DataFrame export."""

import pandas as pd
import pytest

from hmpi import evaluate_sample
from hmpi.contracts import InputError
from hmpi.pipeline import SampleEvaluator
from hmpi.report import (
    format_indices,
    format_value,
    gauge_percentage,
    report_lines,
    results_to_frame,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def worked_result(pb_cu_concentrations):
    return evaluate_sample("WQ-001", pb_cu_concentrations)


@pytest.mark.parametrize("value, precision, expected", [
    (75.5, 2, "75.50"),
    (199.2537, 3, "199.254"),
    (0.0, 0, "0"),
    (-12.345, 1, "-12.3"),
])
def test_format_value(value, precision, expected):
    assert format_value(value, precision) == expected


def test_format_indices_uses_stable_names(worked_result):
    formatted = format_indices(worked_result, 2)

    assert list(formatted) == ["HPI", "HEI", "HMPI", "HCI", "Cd", "PI", "PLI"]
    assert formatted["HEI"] == "2.50"
    assert formatted["HPI"] == "199.25"


@pytest.mark.parametrize("index, value, expected", [
    ("PLI", 5.0, 50.0),
    ("HMPI", 75.0, 50.0),
    ("HMPI", 300.0, 100.0),
    ("HPI", -20.0, -20.0 / 150.0 * 100.0),
    ("HEI", 150.0, 100.0),
])
def test_gauge_percentage(index, value, expected):
    assert gauge_percentage(index, value) == pytest.approx(expected)


def test_gauge_unknown_index():
    with pytest.raises(InputError):
        gauge_percentage("Cd", 1.0)


def test_report_lines(worked_result):
    lines = report_lines(worked_result, 2)
    text = "\n".join(lines)

    assert lines[0] == "Sample: WQ-001"
    assert "Measured metals: Cu, Pb" in text
    assert "Water quality: Critical - " in text
    assert "Binding index: HMPI" in text
    assert "Excluded from HPI/HMPI" not in text


def test_report_lists_excluded_metals():
    result = evaluate_sample("WQ-002", {"Fe": 0.6, "Pb": 0.01})

    text = "\n".join(report_lines(result))

    assert "Excluded from HPI/HMPI (standard = ideal): Fe" in text


def test_report_lists_hmpi_exclusions_separately(internal_config, make_sample):
    result = SampleEvaluator(internal_config).evaluate(
        make_sample({"Pb": 0.02, "Cu": 1.0}), hmpi_ideals={"Pb": 0.01}
    )

    text = "\n".join(report_lines(result))

    assert "Excluded from HMPI (standard = ideal): Pb" in text
    assert "Excluded from HPI/HMPI" not in text
    assert "Excluded from HPI " not in text


class TestResultsToFrame:
    """One row per sample, full precision unless asked otherwise."""

    def test_columns(self, worked_result):
        df = results_to_frame([worked_result])

        assert list(df.columns) == [
            "sample_id", "HPI", "HEI", "HMPI", "HCI", "Cd", "PI", "PLI",
            "classification", "binding_index",
            "HMPI_level", "HPI_level", "HEI_level", "PLI_level",
            "measured_metals",
        ]
        row = df.iloc[0]
        assert row["classification"] == "Critical"
        assert row["PLI_level"] == "Acceptable"
        assert row["measured_metals"] == "Cu,Pb"

    def test_full_precision_by_default(self, worked_result):
        df = results_to_frame([worked_result])

        assert df.loc[0, "HPI"] == worked_result.HPI

    def test_rounded_for_export(self, worked_result):
        df = results_to_frame([worked_result], precision=1)

        assert df.loc[0, "HPI"] == pytest.approx(199.3)

    def test_one_row_per_sample(self, worked_result):
        other = evaluate_sample("WQ-003", {"Pb": 0.006})

        df = results_to_frame([worked_result, other])

        assert df["sample_id"].tolist() == ["WQ-001", "WQ-003"]

    def test_empty(self):
        df = results_to_frame([])

        assert isinstance(df, pd.DataFrame)
        assert df.empty
        assert "HMPI" in df.columns
