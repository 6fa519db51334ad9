import pytest

from curie_temperature.materials import MATERIALS
from curie_temperature.plotting import ascii_graph, display_graph, save_plot
from curie_temperature.utils import Reading, compute_dielectric, vacuum_capacitance

BATIO3 = MATERIALS["Barium Titanate"]


@pytest.fixture
def lab_table():
    readings = [Reading(20, 10.0), Reading(100, 50.0), Reading(120, 80.0), Reading(150, 40.0)]
    return compute_dielectric(readings, vacuum_capacitance(BATIO3))


def bar_lengths(lines):
    return [line.count("#") for line in lines[2:]]


class TestAsciiGraph:
    def test_one_row_per_reading(self, lab_table):
        lines = ascii_graph(lab_table)
        assert lines[0] == "ASCII Graph: Dielectric Constant vs Temperature"
        assert len(lines) == 2 + len(lab_table)

    def test_longest_bar_is_peak_row(self, lab_table):
        lines = ascii_graph(lab_table)
        lengths = bar_lengths(lines)
        peak = lengths.index(max(lengths))
        assert lines[2 + peak].startswith(" 120°C | ")

    def test_bars_scaled_to_width(self, lab_table):
        lengths = bar_lengths(ascii_graph(lab_table))
        assert 49 <= max(lengths) <= 50
        assert lengths[0] == 6
        assert lengths[1] == 31
        assert 24 <= lengths[3] <= 25

    def test_row_format(self, lab_table):
        row = ascii_graph(lab_table)[2]
        assert row == "  20°C | ###### (0.03)"

    def test_custom_marker_and_width(self, lab_table):
        lines = ascii_graph(lab_table, bar_width=10, bar_char="*")
        assert max(line.count("*") for line in lines[2:]) in (9, 10)
        assert all("#" not in line for line in lines[2:])

    def test_no_data(self):
        empty = compute_dielectric([], 1.0)
        assert ascii_graph(empty) == ["No data to display graph."]

    def test_display(self, lab_table, capsys):
        display_graph(lab_table)
        assert "ASCII Graph" in capsys.readouterr().out


class TestSavePlot:
    def test_writes_png(self, lab_table, tmp_path):
        path = tmp_path / "plot.png"
        save_plot(lab_table, BATIO3, path, Tc=120)
        assert path.exists()
        assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    def test_without_tc(self, lab_table, tmp_path):
        path = tmp_path / "plot.png"
        save_plot(lab_table, MATERIALS["Quartz"], path)
        assert path.exists()
