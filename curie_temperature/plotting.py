import logging

import matplotlib.pyplot as plt

logger = logging.getLogger(__name__)


def ascii_graph(table, bar_width=50, bar_char="#"):
    if table.empty:
        return ["No data to display graph."]

    scale = bar_width / table["epsilon_r"].max()
    lines = [
        "ASCII Graph: Dielectric Constant vs Temperature",
        "-----------------------------------------------",
    ]
    for temp, eps in zip(table["Temperature_C"], table["epsilon_r"]):
        bars = bar_char * int(eps * scale)
        lines.append(f"{temp:>4}°C | {bars} ({eps:.2f})")
    return lines


def display_graph(table, bar_width=50, bar_char="#"):
    print()
    print("\n".join(ascii_graph(table, bar_width, bar_char)))


def plot_epsilon(T, epsilon, label):
    plt.plot(T, epsilon, marker="o", label=label)


def mark_tc(Tc, label):
    plt.axvline(Tc, linestyle="--", color="k", linewidth=1, label=label)


def finalize_plot(title, xlabel, ylabel):
    plt.title(title)
    plt.xlabel(xlabel)
    plt.ylabel(ylabel)
    plt.legend()
    plt.grid(True)
    plt.tight_layout()


def save_plot(table, material, path, Tc=None):
    plt.figure()
    try:
        plot_epsilon(table["Temperature_C"], table["epsilon_r"], material.name)
        if Tc is not None:
            mark_tc(Tc, f"Tc ≈ {Tc}°C")
        finalize_plot(
            f"Dielectric Constant vs Temperature ({material.name})",
            "Temperature (°C)",
            "Dielectric constant ε",
        )
        plt.savefig(path)
    finally:
        plt.close()
    logger.info("Saved plot to %s", path)
