"""End-to-end tests of single-sample evaluation."""

import pytest
from pydantic import ValidationError

from hmpi import ComputationError, InputError, evaluate_sample
from hmpi.pipeline import SampleEvaluator
from hmpi.schemas import IndexName, QualityLevel, SampleMeta

pytestmark = pytest.mark.integration


class TestWorkedExample:
    """Pb at twice its standard and Cu at half of it."""

    @pytest.fixture
    def result(self, pb_cu_concentrations):
        return evaluate_sample("WQ-001", pb_cu_concentrations)

    def test_indices(self, result):
        expected_hpi = (100.0 * 200.0 + 0.5 * 50.0) / 100.5

        assert result.HPI == pytest.approx(expected_hpi)
        assert result.HMPI == result.HPI
        assert result.HEI == pytest.approx(2.5)
        assert result.HCI == pytest.approx(1.25)
        assert result.Cd == pytest.approx(1.0)
        assert result.PI == pytest.approx(1.25)
        assert result.PLI == pytest.approx(1.0)

    def test_classification(self, result):
        assert result.classification == QualityLevel.CRITICAL
        assert result.binding_index == IndexName.HMPI
        assert result.per_index_level == {
            IndexName.HMPI: QualityLevel.CRITICAL,
            IndexName.HPI: QualityLevel.CRITICAL,
            IndexName.HEI: QualityLevel.GOOD,
            IndexName.PLI: QualityLevel.ACCEPTABLE,
        }

    def test_bookkeeping(self, result):
        assert result.sample_id == "WQ-001"
        assert result.measured_metals == ("Cu", "Pb")
        assert result.excluded_from_hpi == ()

    def test_result_is_frozen(self, result):
        with pytest.raises(ValidationError):
            result.HPI = 0.0

    def test_dump_keeps_stable_field_names(self, result):
        dumped = result.model_dump()

        for key in ("HPI", "HEI", "HMPI", "HCI", "Cd", "PI", "PLI", "classification"):
            assert key in dumped

    def test_levels_are_read_only(self, result):
        with pytest.raises(TypeError):
            result.per_index_level[IndexName.HPI] = QualityLevel.GOOD

        assert result.per_index_level[IndexName.HPI] == QualityLevel.CRITICAL

    def test_dumped_levels_are_plain_dict(self, result):
        levels = result.model_dump()["per_index_level"]

        assert type(levels) is dict
        assert levels[IndexName.PLI] == QualityLevel.ACCEPTABLE
        assert result.model_dump(mode="json")["per_index_level"]["HEI"] == "Good"


def test_hmpi_hpi_tie_binds_hmpi():
    result = evaluate_sample("WQ-002", {"Pb": 0.006})

    assert result.HPI == pytest.approx(60.0)
    assert result.HMPI == pytest.approx(60.0)
    assert result.classification == QualityLevel.POOR
    assert result.binding_index == IndexName.HMPI


def test_zero_concentration_gives_zero_pli():
    result = evaluate_sample("WQ-003", {"Fe": 0.1, "Pb": 0.0})

    assert result.excluded_from_hpi == ("Fe",)
    assert result.HPI == pytest.approx(0.0)
    assert result.PLI == 0.0


def test_metal_below_ideal_gives_negative_hpi():
    result = evaluate_sample("WQ-011", {"Fe": 0.05}, ideals={"Fe": 0.1})

    assert result.HPI == pytest.approx(-25.0)
    assert result.HMPI == result.HPI
    assert result.classification == QualityLevel.GOOD


def test_standard_equal_ideal_only_sample_fails():
    with pytest.raises(ComputationError, match="standard == ideal"):
        evaluate_sample("WQ-004", {"Fe": 0.5})


def test_standard_equal_ideal_metal_excluded():
    result = evaluate_sample("WQ-005", {"Fe": 0.6, "Pb": 0.01})

    assert result.HPI == pytest.approx(100.0)
    assert result.excluded_from_hpi == ("Fe",)
    # Fe still counts toward the ratio indices
    assert result.HEI == pytest.approx(3.0)


@pytest.mark.parametrize("concentrations, message", [
    ({}, "at least one metal"),
    ({"Pb": -0.01}, "negative"),
    ({"Sn": 0.1}, "unknown metal symbol"),
    ({"Pb": float("nan")}, "not finite"),
])
def test_invalid_concentrations(concentrations, message):
    with pytest.raises(InputError, match=message):
        evaluate_sample("WQ-006", concentrations)


def test_symbol_spelling_is_normalized():
    result = evaluate_sample("WQ-012", {"pb": 0.02, " CU ": 1.0})

    assert result.measured_metals == ("Cu", "Pb")
    assert result.HEI == pytest.approx(2.5)


def test_same_metal_twice_rejected():
    with pytest.raises(InputError, match="more than once"):
        evaluate_sample("WQ-013", {"Pb": 0.02, "pb": 0.03})


def test_meta_accepts_dict_and_model():
    meta = {"sampleId": "WQ-007", "latitude": 40.7128, "longitude": -74.006}

    from_dict = evaluate_sample(meta, {"Pb": 0.005})
    from_model = evaluate_sample(SampleMeta(sample_id="WQ-007"), {"Pb": 0.005})

    assert from_dict.sample_id == from_model.sample_id == "WQ-007"
    assert from_dict.HPI == from_model.HPI


class TestOverrides:
    """Config and per-sample standards overrides."""

    def test_per_sample_override(self, pb_cu_concentrations):
        result = evaluate_sample("WQ-008", pb_cu_concentrations, standards={"Pb": 0.02})

        assert result.HEI == pytest.approx(1.5)
        assert result.Cd == pytest.approx(0.0)

    def test_per_sample_override_does_not_leak(self, internal_config, make_sample,
                                               pb_cu_concentrations):
        evaluator = SampleEvaluator(internal_config)
        sample = make_sample(pb_cu_concentrations)

        overridden = evaluator.evaluate(sample, standards={"Pb": 0.02})
        default = evaluator.evaluate(sample)

        assert overridden.HEI == pytest.approx(1.5)
        assert default.HEI == pytest.approx(2.5)

    def test_config_override(self, make_config, make_sample, pb_cu_concentrations):
        config = make_config(STANDARDS={"Cu": 1.0})

        result = SampleEvaluator(config).evaluate(make_sample(pb_cu_concentrations))

        assert result.HEI == pytest.approx(3.0)

    def test_per_sample_wins_over_config(self, make_config, make_sample):
        config = make_config(STANDARDS={"Pb": 0.05})

        result = SampleEvaluator(config).evaluate(
            make_sample({"Pb": 0.02}), standards={"Pb": 0.04}
        )

        assert result.PI == pytest.approx(0.5)

    def test_ideal_override_enters_quality_rating(self):
        result = evaluate_sample("WQ-009", {"Pb": 0.01}, ideals={"Pb": 0.005})

        assert result.HPI == pytest.approx(100.0)
        assert result.HEI == pytest.approx(1.0)

    def test_unknown_override_rejected(self, pb_cu_concentrations):
        with pytest.raises(InputError, match="unknown metal symbol"):
            evaluate_sample("WQ-010", pb_cu_concentrations, standards={"U": 0.03})

    def test_separate_hmpi_standards(self, internal_config, make_sample,
                                     pb_cu_concentrations):
        result = SampleEvaluator(internal_config).evaluate(
            make_sample(pb_cu_concentrations), hmpi_standards={"Pb": 0.02}
        )

        assert result.HPI == pytest.approx((100.0 * 200.0 + 0.5 * 50.0) / 100.5)
        assert result.HMPI == pytest.approx((50.0 * 100.0 + 0.5 * 50.0) / 50.5)
        assert result.HEI == pytest.approx(2.5)

    def test_hmpi_exclusions_reported_separately(self, internal_config, make_sample,
                                                 pb_cu_concentrations):
        result = SampleEvaluator(internal_config).evaluate(
            make_sample(pb_cu_concentrations), hmpi_ideals={"Pb": 0.01}
        )

        assert result.excluded_from_hpi == ()
        assert result.excluded_from_hmpi == ("Pb",)
        # only Cu is left in the HMPI pass
        assert result.HMPI == pytest.approx(50.0)
        assert result.binding_index == IndexName.HPI
