import logging
from pathlib import Path

logger = logging.getLogger(__name__)

RESULTS_SUFFIX = "_results.txt"
PLOT_SUFFIX = "_epsilon_vs_T.png"

RULE = "-" * 56


def file_stem(material):
    return material.name.replace(" ", "_")


def results_filename(material):
    return file_stem(material) + RESULTS_SUFFIX


def summary_lines(material, c0):
    side = material.side_mm
    return [
        f"Material: {material.name}",
        f"Sample dimensions: {side:.2f} mm × {side:.2f} mm × {material.thickness_mm:.2f} mm",
        f"Vacuum capacitance (C0): {c0:.2f} pF",
    ]


def table_lines(table, temp_heading="Temp (°C)"):
    lines = [f"{temp_heading}\tCapacitance (pF)\tDielectric Constant (ε)", RULE]
    for temp, cap, eps in table.itertuples(index=False):
        lines.append(f"{temp}\t\t{cap:.2f}\t\t{eps:.2f}")
    return lines


def print_results(material, c0, table):
    print("\n------ RESULTS ------")
    print("\n".join(summary_lines(material, c0)))
    print()
    print("\n".join(table_lines(table)))


def save_to_file(material, c0, table, output_dir="."):
    path = Path(output_dir) / results_filename(material)
    lines = ["Dielectric Constant Measurement Results"]
    lines += summary_lines(material, c0)
    lines.append("")
    lines += table_lines(table, temp_heading="Temperature (°C)")

    try:
        with path.open("w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
    except OSError:
        logger.warning("Could not write results to %s", path, exc_info=True)
        print("\nError: Could not create file for saving results.")
        return None

    print(f"\nResults saved to '{path}'.")
    return path
