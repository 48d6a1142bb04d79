# -*- coding: utf-8 -*-
"""
Created on Mon Feb 02 15:47:30 2026

@author: bboyg
"""

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt


def load_output(csv_path="rcs_phi_cut.csv"):
    df = pd.read_csv(csv_path)
    return df


def plot_phi_cut(df, polar=True, show=True):
    """
    Plot RCS (dB) against phi for one phi cut (output of run_phi_cut).
    Sentinel 'no data' values are plotted as-is.
    """
    phi = df["phi"].to_numpy()
    rcs = df["rcs_db"].to_numpy()

    # close the loop
    phi = np.append(phi, phi[0] + 360.0)
    rcs = np.append(rcs, rcs[0])

    fig = plt.figure()
    if polar:
        ax = fig.add_subplot(111, projection="polar")
        ax.plot(np.radians(phi), rcs)
        ax.set_theta_zero_location("N")
    else:
        ax = fig.add_subplot(111)
        ax.plot(phi, rcs)
        ax.set_xlabel("Phi (deg)")
        ax.set_ylabel("RCS (dB m²)")

    f = float(df["frequency"].iloc[0])
    d = float(df["incident_direction"].iloc[0])
    th = float(df["theta"].iloc[0])
    ax.set_title(f"RCS phi cut: f={f:.1f} MHz, dir={d:.0f}, theta={th:.1f}°")
    ax.grid(True)

    if show:
        plt.show()
    return fig


def plot_frequency_sweep(df, show=True):
    """Plot RCS (dB) vs frequency (output of run_frequency_sweep)."""
    fig = plt.figure(figsize=(8, 4))
    ax = fig.add_subplot(111)
    ax.plot(df["frequency"].to_numpy(), df["rcs_db"].to_numpy(), marker="o")
    ax.set_xlabel("Frequency (MHz)")
    ax.set_ylabel("RCS (dB m²)")
    ax.set_title("RCS vs frequency")
    ax.grid(True)

    if show:
        plt.show()
    return fig


if __name__ == "__main__":
    df = load_output("rcs_phi_cut.csv")
    plot_phi_cut(df)
