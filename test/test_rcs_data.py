# -*- coding: utf-8 -*-
"""
Created on Mon Feb 02 10:22:03 2026

@author: bboyg
"""

import numpy as np
import pandas as pd
import tempfile
from pathlib import Path

from rcs_data import (
    RCSSample,
    COLUMNS,
    samples_from_frame,
    samples_to_frame,
    load_rcs_csv,
    synthetic_rcs_dataset,
)

def test_samples_from_frame_accepts_aliases():
    df = pd.DataFrame({
        "Freq": [10.0, 20.0],
        "direction": [1, 2],
        "theta": [0.0, 45.0],
        "phi": [90.0, 270.0],
        "rcs_db": [-12.5, -3.0],
    })
    samples = samples_from_frame(df)
    assert samples == [
        RCSSample(10.0, 1.0, 0.0, 90.0, -12.5),
        RCSSample(20.0, 2.0, 45.0, 270.0, -3.0),
    ]

def test_samples_from_frame_missing_column():
    df = pd.DataFrame({"frequency": [1.0], "theta": [0.0], "phi": [0.0], "rcs": [0.0]})
    try:
        samples_from_frame(df)
        assert False, "Expected missing column error"
    except ValueError as e:
        assert "incident_direction" in str(e)

def test_csv_and_txt_loading_keep_row_order():
    samples = [
        RCSSample(15.0, 2.0, 30.0, 10.0, -20.0),
        RCSSample(5.0, 1.0, 0.0, 0.0, -10.0),
        RCSSample(5.0, 1.0, 0.0, 15.0, -11.0),
    ]

    with tempfile.TemporaryDirectory() as d:
        csv_path = Path(d) / "rcs.csv"
        samples_to_frame(samples).to_csv(csv_path, index=False)
        assert load_rcs_csv(csv_path) == samples

        txt_path = Path(d) / "rcs.txt"
        lines = ["# frequency dir theta phi rcs"]
        lines += [" ".join(str(x) for x in (s.frequency, s.incident_direction, s.theta, s.phi, s.rcs))
                  for s in samples]
        txt_path.write_text("\n".join(lines) + "\n")
        assert load_rcs_csv(txt_path) == samples

def test_txt_wrong_column_count():
    with tempfile.TemporaryDirectory() as d:
        path = Path(d) / "bad.dat"
        path.write_text("1 2 3\n4 5 6\n")
        try:
            load_rcs_csv(path)
            assert False, "Expected column count error"
        except ValueError:
            assert True

def test_samples_to_frame_columns():
    df = samples_to_frame([RCSSample(1.0, 2.0, 3.0, 4.0, 5.0)])
    assert list(df.columns) == COLUMNS
    assert np.allclose(df.iloc[0].to_numpy(), [1, 2, 3, 4, 5])

def test_synthetic_dataset_grid_and_determinism():
    a = synthetic_rcs_dataset()
    # 4 freqs x 8 dirs x 13 theta x 24 phi
    assert len(a) == 4 * 8 * 13 * 24
    assert a == synthetic_rcs_dataset()

    df = samples_to_frame(a)
    assert sorted(df["frequency"].unique()) == [5.0, 10.0, 20.0, 30.0]
    assert sorted(df["incident_direction"].unique()) == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]
    assert df["phi"].max() < 360.0
    assert df["theta"].max() == 180.0
