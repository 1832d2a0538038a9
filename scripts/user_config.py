"""hmpi User Configuration.

This is the user-facing configuration file. Enter the sample and its
measured concentrations here. Metals left as None were not measured and
take no part in any index.

Usage:
    python scripts/evaluate_sample.py scripts/user_config.py
    python scripts/evaluate_sample.py scripts/user_config.py --precision 3
"""

CONFIG = {
    # ========================================================================
    # SAMPLE METADATA
    # ========================================================================
    "SAMPLE": {
        "sampleId": "WQ-001",
        "latitude": 40.7128,
        "longitude": -74.0060,
        "wellDepth": 25.5,
        "samplingDate": "2025-03-05",
    },

    # ========================================================================
    # MEASURED CONCENTRATIONS (mg/L)
    # ========================================================================
    "CONCENTRATIONS": {
        # Toxic metals
        "Pb": 0.02,
        "Cd": None,
        "Cr": 0.01,
        "As": 0.004,
        "Hg": None,
        "Ni": None,
        # Essential elements
        "Cu": 1.0,
        "Zn": 0.5,
        "Fe": None,
        "Mn": None,
        # Trace elements
        "Co": None,
    },

    # ========================================================================
    # STANDARD / IDEAL OVERRIDES (mg/L), default: WHO guideline values
    # ========================================================================
    "STANDARDS": {},
    "IDEAL_VALUES": {},

    "DISPLAY_PRECISION": 2,
    "LOG_LEVEL": "INFO",
}
