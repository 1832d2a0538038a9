"""Core sample evaluation runner.

This module contains the actual runner, separated from argument parsing.
Scripts are thin wrappers; this is the real implementation.
"""

import json
import logging
import importlib.util
from pathlib import Path
from typing import Optional

from hmpi.pipeline import SampleEvaluator
from hmpi.report import report_lines
from hmpi.schemas import ParamConfig, Result, SampleInput, SampleMeta, UserConfig, resolve_config


logger = logging.getLogger(__name__)


def load_user_config_dict(config_path: str) -> dict:
    """Load user config dict from Python file.

    Returns the raw dict before Pydantic validation.

    Parameters
    ----------
    config_path : str
        Path to user config Python file containing CONFIG dict.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If no CONFIG dict found in file.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    spec = importlib.util.spec_from_file_location("config_module", path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Could not load config module from {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    # Find CONFIG dict
    for name in dir(module):
        if name.startswith('CONFIG'):
            obj = getattr(module, name)
            if isinstance(obj, dict):
                return obj

    raise ValueError(f"No CONFIG dict found in {path}")


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a single console handler."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Clear existing handlers and add new ones
    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    root.addHandler(ch)


def sample_from_user_config(user_cfg: UserConfig) -> SampleInput:
    """Build the SampleInput carried by a user config file.

    Concentrations left as ``None`` are treated as not measured.

    Raises
    ------
    ValueError
        If the file has no SAMPLE section.
    """
    if not user_cfg.sample:
        raise ValueError("User config has no SAMPLE section")

    meta = SampleMeta.model_validate(user_cfg.sample)
    concentrations = {
        symbol: value
        for symbol, value in (user_cfg.concentrations or {}).items()
        if value is not None
    }
    return SampleInput(meta=meta, concentrations=concentrations)


def run_sample(user_config_path: str,
               precision: Optional[int] = None,
               verbose: bool = False) -> Result:
    """Evaluate the sample described by a user config file and print a report.

    Steps:
    1. Load and resolve configuration (Param < User < command line)
    2. Build the sample from the SAMPLE and CONCENTRATIONS sections
    3. Evaluate and print the formatted report

    Parameters
    ----------
    user_config_path : str
        Path to user config file (Python file with CONFIG dict).
    precision : int, optional
        Display precision; overrides DISPLAY_PRECISION from the file.
    verbose : bool, optional
        If True, enable DEBUG logging and print the full resolved config.

    Returns
    -------
    Result
        The full-precision result (the printed report is rounded).

    Raises
    ------
    FileNotFoundError
        If user_config_path does not exist.
    InputError, ComputationError
        If the sample cannot be evaluated.

    Examples
    --------
    ::

        run_sample("scripts/user_config.py", precision=3)
    """
    user_cfg = UserConfig.model_validate(load_user_config_dict(user_config_path))

    updates = {}
    if precision is not None:
        updates["precision"] = precision
    if verbose:
        updates["log_level"] = "DEBUG"
    if updates:
        # validate the command-line values through the same schema
        user_cfg = UserConfig.model_validate({**user_cfg.model_dump(exclude_none=True), **updates})

    config = resolve_config(ParamConfig(), user_cfg)
    setup_logging(config.logging.level)

    print(f"\n{'='*60}")
    print("Heavy Metal Pollution Index Calculator")
    print('='*60)
    print(f"Config: {user_config_path}")

    if verbose:
        print("\nFull Internal Configuration:")
        print(json.dumps(config.model_dump(), indent=2))
    print('='*60)

    sample = sample_from_user_config(user_cfg)
    result = SampleEvaluator(config).evaluate(sample)

    for line in report_lines(result, config.report.precision):
        print(line)
    print('='*60)

    return result
