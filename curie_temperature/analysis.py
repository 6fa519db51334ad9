import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple, Optional

from curie_temperature.collector import input_readings
from curie_temperature.config import DEFAULT_CONFIG, get_paths
from curie_temperature.materials import MATERIALS, Material, get_material
from curie_temperature.plotting import display_graph, save_plot
from curie_temperature.report import PLOT_SUFFIX, file_stem, print_results, save_to_file
from curie_temperature.utils import Reading, compute_dielectric, find_tc, load_data, vacuum_capacitance

logger = logging.getLogger(__name__)


@dataclass
class Session:
    material: Material
    readings: list[Reading] = field(default_factory=list)


class CurieEstimate(NamedTuple):
    temperature_c: int
    reference_c: float
    difference_c: float
    epsilon_max: float


def estimate_curie(material, table) -> Optional[CurieEstimate]:
    Tc = find_tc(table["Temperature_C"], table["epsilon_r"])
    if Tc is None:
        return None
    return CurieEstimate(
        temperature_c=Tc,
        reference_c=material.curie_temp_c,
        difference_c=abs(Tc - material.curie_temp_c),
        epsilon_max=float(table["epsilon_r"].max()),
    )


def analyze_curie_temperature(material, table):
    estimate = estimate_curie(material, table)
    if estimate is None:
        print("\nNot enough data points to estimate Curie temperature.")
        return None

    print(f"\nEstimated Curie Temperature: {estimate.temperature_c}°C")
    print(f"Expected Curie Temperature for {material.name}: {estimate.reference_c:.2f}°C")
    print(f"Difference: {estimate.difference_c:.2f}°C")
    return estimate


def select_material(materials=MATERIALS):
    names = list(materials)
    print("\nAvailable materials:")
    for i, name in enumerate(names, start=1):
        print(f"{i}. {name}")

    prompt = f"Select a material (1-{len(names)}): "
    while True:
        text = input(prompt)
        try:
            choice = int(text.strip())
        except ValueError:
            choice = 0
        if 1 <= choice <= len(names):
            return materials[names[choice - 1]]
        prompt = f"Invalid selection. Please enter a number between 1 and {len(names)}: "


def process_session(session, config=DEFAULT_CONFIG):
    """
    Results table, Curie analysis, ASCII graph and saved report for a session
    that already holds its sorted readings.
    """
    material = session.material
    c0 = vacuum_capacitance(material)
    table = compute_dielectric(session.readings, c0)
    logger.debug("C0 = %.4f pF for %s", c0, material.name)

    print_results(material, c0, table)

    estimate = None
    if material.is_ferroelectric:
        estimate = analyze_curie_temperature(material, table)
    else:
        print("\nNote: This material doesn't have a Curie temperature (non-ferroelectric).")

    display_graph(table, config["bar_width"], config["bar_char"])

    try:
        paths = get_paths(config)
    except OSError:
        logger.warning("Could not create output directory %s", config["output_dir"], exc_info=True)
        paths = {"output": Path(config["output_dir"])}
    save_to_file(material, c0, table, paths["output"])

    if config["save_plot"]:
        plot_path = paths["output"] / (file_stem(material) + PLOT_SUFFIX)
        Tc = estimate.temperature_c if estimate else None
        try:
            save_plot(table, material, plot_path, Tc)
        except OSError:
            logger.warning("Could not save plot to %s", plot_path, exc_info=True)
            print("\nError: Could not save plot.")
        else:
            print(f"Plot saved to '{plot_path}'.")

    return estimate


def simulate(config=DEFAULT_CONFIG):
    session = Session(select_material())
    input_readings(session.readings)

    if not session.readings:
        print("\nNo data entered. Returning to main menu.")
        return None

    return process_session(session, config)


def run_from_csv(material_name, filepath, config=DEFAULT_CONFIG):
    try:
        material = get_material(material_name)
    except KeyError as exc:
        print(f"Error: {exc.args[0]}")
        return None

    try:
        readings = load_data(filepath)
    except (OSError, ValueError):
        logger.warning("Could not load readings from %s", filepath, exc_info=True)
        print(f"Error: Could not read readings from '{filepath}'.")
        return None

    session = Session(material, readings)
    if not session.readings:
        print("\nNo valid readings found.")
        return None

    return process_session(session, config)
