#!/usr/bin/env python3
"""
Plot field curing curves for a range of solar insolation levels.
"""

import sys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from forage.harvest import curing, loss_respiration

# Mild day on moist soil, average first-cut swath
CONDITIONS = {"dry_bulb": 18.0, "soil_moisture": 0.2, "swath_density": 500.0}


def plot_curing_curves(output: Path = Path("curing_curves.png")) -> Path:
    """Plot a mowing day and the following day for conditioned and unconditioned forage."""
    insolation_levels = np.linspace(200, 800, 4)
    day_len = 14

    fig, axes = plt.subplots(1, 2, figsize=(12, 5), sharey=True)
    fig.suptitle("Field curing of first-cut forage", fontsize=14, fontweight="bold")

    for ax, conditioned in zip(axes, (True, False)):
        for si in insolation_levels:
            day1 = curing(0.80, si, day_len, 0, conditioned, 1, 2.0, 0.7, True, False, **CONDITIONS)
            day2 = curing(day1[-1], si, day_len, 0, conditioned, 1, 2.0, 0.7, False, False, **CONDITIONS)
            hours = np.arange(len(day1) + len(day2))
            respiration = loss_respiration(day1[0], day2[-1], CONDITIONS["dry_bulb"], len(hours) - 2)
            ax.plot(hours, np.array(day1 + day2) * 100, label=f"{si:.0f} W/m² (resp. {respiration:.1%})")

        ax.axhline(20, color="gray", linestyle="--", linewidth=0.8)
        ax.set_title("Conditioned" if conditioned else "Unconditioned")
        ax.set_xlabel("Hour (day 1 + day 2)")
        ax.grid(alpha=0.3)
        ax.legend(fontsize=8)

    axes[0].set_ylabel("Moisture (% fresh matter)")
    fig.tight_layout()
    fig.savefig(output, dpi=150)
    plt.close(fig)
    return output


if __name__ == "__main__":
    path = plot_curing_curves()
    print(f"Saved {path}")
