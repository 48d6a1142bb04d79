# -*- coding: utf-8 -*-
"""
Created on Mon Feb 02 16:12:58 2026

@author: bboyg

Usage:
    python run_rcs_queries.py --data rcs_table.csv --out-dir out --plot
"""

import argparse
from pathlib import Path

from rcs_data import load_rcs_csv, synthetic_rcs_dataset
from interpolation_engine import RCSInterpolationEngine
from rcs_scenarios import (
    run_compatibility_scenario,
    run_incident_direction_sweep,
    run_frequency_sweep,
    run_phi_periodicity_check,
    run_phi_cut,
)


def build_parser():
    parser = argparse.ArgumentParser(description="Interpolate RCS from a sample table")
    parser.add_argument("--data", type=Path, default=None,
                        help="RCS table (.csv with header, or whitespace .txt/.dat); synthetic demo table if omitted")
    parser.add_argument("--frequency", type=float, default=10.0, help="frequency [MHz]")
    parser.add_argument("--direction", type=float, default=1.0, help="catalog incident direction id")
    parser.add_argument("--theta", type=float, default=45.0, help="observation theta [deg]")
    parser.add_argument("--phi", type=float, default=90.0, help="observation phi [deg]")
    parser.add_argument("--out-dir", type=Path, default=None, help="write scenario CSVs here")
    parser.add_argument("--plot", action="store_true", help="show phi cut and frequency sweep plots")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.data is not None:
        print(f"Reading RCS data from {args.data}...")
        samples = load_rcs_csv(args.data)
    else:
        print("Using synthetic RCS table...")
        samples = synthetic_rcs_dataset()

    engine = RCSInterpolationEngine(samples)
    print(f"Engine ready: {len(engine)} samples, "
          f"{len(engine.frequencies())} frequencies, "
          f"{len(engine.incident_directions())} incident directions")

    f, d, th, ph = args.frequency, args.direction, args.theta, args.phi

    # 1) catalog id vs spherical angles of the same direction
    print("\n1. Compatibility:")
    df_compat = run_compatibility_scenario(engine, f, d, th, ph)
    for _, row in df_compat.iterrows():
        if row["query"] == "direction":
            where = f"direction={row['incident_direction']:.1f}"
        else:
            where = f"incident(theta={row['incident_theta']:.1f}°, phi={row['incident_phi']:.1f}°)"
        print(f"frequency={row['frequency']:.1f} MHz, {where}, "
              f"theta={th:.1f}°, phi={ph:.1f}°, RCS={row['rcs_db']:.2f} dB(m²)")

    # 2) arbitrary incident directions
    print("\n2. Arbitrary incident directions:")
    df_dirs = run_incident_direction_sweep(engine, f, theta=th, phi=ph)
    for i, row in df_dirs.iterrows():
        print(f"case {i + 1}: frequency={row['frequency']:.1f} MHz, "
              f"incident(theta={row['incident_theta']:.1f}°, phi={row['incident_phi']:.1f}°) "
              f"-> dirs {row['d1']}/{row['d2']} t={row['t']:.3f}, RCS={row['rcs_db']:.2f} dB(m²)")

    # 3) frequency sweep
    print("\n3. Frequency sweep:")
    df_freq = run_frequency_sweep(engine, theta=th, phi=ph)
    for _, row in df_freq.iterrows():
        print(f"frequency={row['frequency']:.1f} MHz, "
              f"incident(theta={row['incident_theta']:.1f}°, phi={row['incident_phi']:.1f}°), "
              f"RCS={row['rcs_db']:.2f} dB(m²)")

    # 4) phi periodicity
    print("\n4. Phi periodicity:")
    df_per = run_phi_periodicity_check(engine, f, d, th)
    row = df_per.iloc[0]
    print(f"phi={row['phi_a']:.1f}°: RCS={row['rcs_a_db']:.2f} dB(m²)")
    print(f"phi={row['phi_b']:.1f}°: RCS={row['rcs_b_db']:.2f} dB(m²)")
    print("consistent:", bool(row["consistent"]))

    df_cut = run_phi_cut(engine, f, d, theta=th)

    if args.out_dir is not None:
        args.out_dir.mkdir(parents=True, exist_ok=True)
        outputs = {
            "rcs_compatibility.csv": df_compat,
            "rcs_incident_sweep.csv": df_dirs,
            "rcs_frequency_sweep.csv": df_freq,
            "rcs_phi_periodicity.csv": df_per,
            "rcs_phi_cut.csv": df_cut,
        }
        for name, df in outputs.items():
            df.to_csv(args.out_dir / name, index=False)
        print(f"\nSaved {len(outputs)} CSVs to {args.out_dir}")

    if args.plot:
        from plot_results import plot_phi_cut, plot_frequency_sweep
        plot_phi_cut(df_cut, show=False)
        plot_frequency_sweep(df_freq)

    return 0


if __name__ == "__main__":
    main()
