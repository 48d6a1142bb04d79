# -*- coding: utf-8 -*-
"""
Created on Mon Feb 02 16:40:51 2026

@author: bboyg
"""

import tempfile
from pathlib import Path

import pandas as pd

from rcs_data import synthetic_rcs_dataset, samples_to_frame
from run_rcs_queries import main

def test_runner_with_synthetic_table(capsys):
    with tempfile.TemporaryDirectory() as d:
        assert main(["--out-dir", d]) == 0

        out = capsys.readouterr().out
        assert "Using synthetic RCS table" in out
        assert "consistent: True" in out
        assert "RCS=" in out and "dB(m²)" in out

        saved = sorted(p.name for p in Path(d).glob("*.csv"))
        assert saved == [
            "rcs_compatibility.csv",
            "rcs_frequency_sweep.csv",
            "rcs_incident_sweep.csv",
            "rcs_phi_cut.csv",
            "rcs_phi_periodicity.csv",
        ]
        cut = pd.read_csv(Path(d) / "rcs_phi_cut.csv")
        assert len(cut) == 72

def test_runner_reads_table_from_disk(capsys):
    samples = synthetic_rcs_dataset(frequencies=(5.0, 15.0), directions=(1, 2, 3))
    with tempfile.TemporaryDirectory() as d:
        path = Path(d) / "table.csv"
        samples_to_frame(samples).to_csv(path, index=False)

        main(["--data", str(path), "--frequency", "12", "--theta", "30", "--phi", "-45"])

    out = capsys.readouterr().out
    assert "Reading RCS data from" in out
    assert f"{len(samples)} samples, 2 frequencies, 3 incident directions" in out
