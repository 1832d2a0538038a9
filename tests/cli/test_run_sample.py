"""Test the config-file runner behind scripts/evaluate_sample.py."""

import inspect
import logging
from pathlib import Path

import pytest

from hmpi.cli import run_sample
from hmpi.cli.runner import load_user_config_dict, sample_from_user_config, setup_logging
from hmpi.contracts import ComputationError
from hmpi.schemas import QualityLevel, UserConfig

pytestmark = pytest.mark.integration

EXAMPLE_CONFIG = Path(__file__).resolve().parents[2] / "scripts" / "user_config.py"

CONFIG_TEMPLATE = '''
CONFIG = {{
    "SAMPLE": {{"sampleId": "{sample_id}", "latitude": 40.7128, "longitude": -74.006}},
    "CONCENTRATIONS": {concentrations},
    "STANDARDS": {standards},
    "DISPLAY_PRECISION": 2,
}}
'''


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep the runner from reconfiguring the root logger."""
    monkeypatch.setattr("hmpi.cli.runner.setup_logging", lambda level: None)


@pytest.fixture
def write_config(tmp_path):
    def _write(concentrations, standards=None, sample_id="WQ-001"):
        path = tmp_path / "user_config.py"
        path.write_text(CONFIG_TEMPLATE.format(
            sample_id=sample_id,
            concentrations=repr(concentrations),
            standards=repr(standards or {}),
        ))
        return path

    return _write


def test_runs_example_config(capsys):
    result = run_sample(str(EXAMPLE_CONFIG))

    out = capsys.readouterr().out
    assert result.sample_id == "WQ-001"
    assert result.measured_metals == ("As", "Cr", "Cu", "Pb", "Zn")
    assert result.HEI == pytest.approx(2.0 + 0.2 + 0.4 + 0.5 + 0.5 / 3.0)
    assert "Heavy Metal Pollution Index Calculator" in out
    assert "Binding index: HMPI" in out


def test_unmeasured_metals_are_dropped(write_config):
    path = write_config({"Pb": 0.02, "Cu": 1.0, "Hg": None})

    result = run_sample(str(path))

    assert result.measured_metals == ("Cu", "Pb")
    assert result.classification == QualityLevel.CRITICAL


def test_precision_argument_wins_over_file(write_config, capsys):
    path = write_config({"Pb": 0.02, "Cu": 1.0})

    run_sample(str(path), precision=4)

    out = capsys.readouterr().out
    assert "199.2537" in out
    assert "1.2500" in out


def test_standards_from_file(write_config):
    path = write_config({"Pb": 0.02, "Cu": 1.0}, standards={"Pb": 0.02})

    result = run_sample(str(path))

    assert result.HEI == pytest.approx(1.5)


def test_verbose_prints_resolved_config(write_config, capsys):
    path = write_config({"Pb": 0.005})

    run_sample(str(path), verbose=True)

    out = capsys.readouterr().out
    assert "Full Internal Configuration" in out
    assert '"level": "DEBUG"' in out


def test_undefined_hpi_propagates(write_config):
    path = write_config({"Fe": 0.4})

    with pytest.raises(ComputationError):
        run_sample(str(path))


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_sample(str(tmp_path / "absent.py"))


def test_config_without_config_dict(tmp_path):
    path = tmp_path / "empty.py"
    path.write_text("SETTINGS = {}\n")

    with pytest.raises(ValueError, match="No CONFIG dict"):
        load_user_config_dict(str(path))


def test_sample_section_required():
    with pytest.raises(ValueError, match="no SAMPLE section"):
        sample_from_user_config(UserConfig(CONCENTRATIONS={"Pb": 0.02}))


def test_setup_logging_installs_single_handler(restore_root_logging):
    setup_logging("debug")
    setup_logging("WARNING")

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)


def test_runner_module_not_shadowed_by_function():
    import hmpi.cli

    assert inspect.ismodule(hmpi.cli.runner)
    assert hmpi.cli.run_sample is hmpi.cli.runner.run_sample
    assert callable(hmpi.cli.runner.setup_logging)
