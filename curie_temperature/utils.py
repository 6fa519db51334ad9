import logging
from typing import NamedTuple

import numpy as np
import pandas as pd
import scipy.constants as sc

logger = logging.getLogger(__name__)

# Permittivity of free space as quoted in the lab handout (F/m)
EPSILON_0 = 8.85e-12

# Lowest temperature a reading may claim (exclusive)
ABSOLUTE_ZERO_C = -273

COLUMNS = ["Temperature_C", "Capacitance_pF", "epsilon_r"]


class Reading(NamedTuple):
    temperature_c: int
    capacitance_pf: float


def validate_reading(temperature_c, capacitance_pf):
    if temperature_c <= ABSOLUTE_ZERO_C or capacitance_pf <= 0:
        raise ValueError(
            f"Invalid values. Temperature must be above {ABSOLUTE_ZERO_C}°C "
            "and capacitance must be positive."
        )
    return Reading(temperature_c, capacitance_pf)


def sort_readings(readings):
    # list.sort is stable, so equal temperatures keep their entry order
    readings.sort(key=lambda r: r.temperature_c)
    return readings


def vacuum_capacitance(material):
    """C0 = eps0 * A / t in pF for a sample given in millimetres."""
    return EPSILON_0 / sc.pico * (material.area_mm2 / material.thickness_mm)


def compute_dielectric(readings, c0):
    df = pd.DataFrame(
        [(r.temperature_c, r.capacitance_pf) for r in readings],
        columns=COLUMNS[:2],
    )
    df["epsilon_r"] = df["Capacitance_pF"] / c0
    return df


def find_tc(T, epsilon):
    """
    Temperature of the peak dielectric constant.

    Returns None when fewer than two points are available. Ties resolve to
    the first maximum in the given order.
    """
    T = np.asarray(T)
    epsilon = np.asarray(epsilon, dtype=float)
    if len(T) < 2:
        return None
    return int(T[int(np.argmax(epsilon))])


def load_data(filepath):
    df = pd.read_csv(filepath)

    missing = [c for c in COLUMNS[:2] if c not in df.columns]
    if missing:
        raise ValueError(f"{filepath}: missing column(s) {', '.join(missing)}")

    df = df[COLUMNS[:2]].apply(pd.to_numeric, errors="coerce")

    # Drop rows that are not physical readings
    valid = (
        np.isfinite(df["Temperature_C"])
        & np.isfinite(df["Capacitance_pF"])
        & (df["Temperature_C"] == df["Temperature_C"].round())
        & (df["Temperature_C"] > ABSOLUTE_ZERO_C)
        & (df["Capacitance_pF"] > 0)
    )
    dropped = int((~valid).sum())
    if dropped:
        logger.warning("Dropped %d invalid row(s) from %s", dropped, filepath)
    df = df[valid]

    readings = [
        Reading(int(t), float(c))
        for t, c in zip(df["Temperature_C"], df["Capacitance_pF"])
    ]
    return sort_readings(readings)
