"""Test the primitive calls each chart emits to its drawing surface."""

import logging
import math

import pytest

from statcanvas.charts import BarChart, LineGraph, PieChart, Point, Scatterplot

ON_LINE = [[0, 1], [1, 3], [2, 5], [3, 7]]


def _frame_line_count(x_ticks=3, y_ticks=3):
    # Two axis lines plus one mark per tick after the origin.
    return 2 + x_ticks + y_ticks


class TestScatterplot:
    def test_title_and_axis_titles(self, surface):
        plot = Scatterplot("Height vs weight", 100, 300)
        plot.set_x("Height", 0, 1, 10, 3)
        plot.set_y("Weight", 0, 1, 10, 3)
        plot.draw(surface)

        texts = surface.named("fill_text")
        assert ("Height vs weight", 115.0, 265.0) in texts
        assert ("Height", 115.0, 340.0) in texts
        assert ("Weight", 0, 0) in texts
        assert (60.0, 285.0) in surface.named("translate")
        assert surface.named("rotate") == [(3 * math.pi / 2,)]

    def test_tick_labels(self, surface):
        plot = Scatterplot("t", 100, 300)
        plot.set_x("x", 0, 2, 50, 2)
        plot.set_y("y", 40, 10, 50, 2)
        plot.draw(surface)
        labels = [args[0] for args in surface.named("fill_text")]
        for expected in ("0", "2", "4", "40", "50", "60"):
            assert expected in labels

    def test_dots_at_mapped_positions(self, surface):
        plot = Scatterplot("t", 100, 300)
        plot.set_x("x", 0, 2, 50, 5)
        plot.set_y("y", 40, 10, 50, 4)
        plot.add_data([(4, 60), (2, 50)])
        plot.draw(surface)
        centres = [args[:2] for args in surface.named("ellipse")]
        assert centres == [(200.0, 200.0), (150.0, 250.0)]
        assert len(surface.named("fill")) == 2

    def test_points_before_axis_start_are_hidden(self, surface):
        plot = Scatterplot("t", 0, 100)
        plot.set_x("x", 5, 1, 10, 3)
        plot.set_y("y", 5, 1, 10, 3)
        plot.add_data([(4, 6), (6, 4), (6, 6), (5, 5)])
        plot.draw(surface)
        assert plot.visible_points() == [(6.0, 6.0), (5.0, 5.0)]
        assert len(surface.named("ellipse")) == 2

    def test_add_data_copies(self):
        data = [[1, 2], [3, 4]]
        plot = Scatterplot("t", 0, 0)
        plot.add_data(data)
        data.append([5, 6])
        data[0][0] = 99
        assert plot.data == [(1.0, 2.0), (3.0, 4.0)]

    def test_line_of_best_fit_returns_and_draws(self, surface):
        plot = Scatterplot("t", 100, 300)
        plot.add_data(ON_LINE)
        a, b = plot.line_of_best_fit("simple", surface)
        assert math.isclose(a, 2.0)
        assert math.isclose(b, 1.0)
        # Endpoints at x = 0 and x = 0 + tick_count.
        (x1, y1), = surface.named("move_to")
        (x2, y2), = surface.named("line_to")
        assert (x1, y1) == pytest.approx((100.0, 290.0))
        assert (x2, y2) == pytest.approx((130.0, 230.0))

    def test_line_of_best_fit_without_surface(self):
        plot = Scatterplot("t", 0, 0)
        plot.add_data(ON_LINE)
        line = plot.line_of_best_fit()
        assert math.isclose(line.slope, 2.0)

    def test_custom_line(self, surface):
        plot = Scatterplot("t", 0, 100)
        plot.set_x("x", 0, 1, 10, 4)
        plot.custom_line(0.5, 1, surface)
        assert surface.named("move_to") == [(0.0, 90.0)]
        assert surface.named("line_to") == [(40.0, 70.0)]

    def test_undefined_line_is_skipped(self, surface, caplog):
        caplog.set_level(logging.WARNING)
        plot = Scatterplot("vertical", 0, 0)
        plot.add_data([[2, 1], [2, 5]])
        line = plot.line_of_best_fit("simple", surface)
        assert math.isnan(line.slope)
        assert surface.named("move_to") == []
        assert any("Skipping undefined line" in rec.message for rec in caplog.records)


class TestLineGraph:
    def test_sorted_by_x_then_descending_y(self):
        data = [(3, 1), (1, 5), (1, 7), (2, 2)]
        graph = LineGraph("t", 0, 0)
        graph.add_data(data)
        assert graph.data == [(1.0, 7.0), (1.0, 5.0), (2.0, 2.0), (3.0, 1.0)]
        assert data == [(3, 1), (1, 5), (1, 7), (2, 2)]

    def test_numeric_ordering(self):
        graph = LineGraph("t", 0, 0)
        graph.add_data([(10, 0), (9, 0), (100, 0)])
        assert [p[0] for p in graph.data] == [9.0, 10.0, 100.0]

    def test_connects_consecutive_points(self, surface):
        graph = LineGraph("t", 0, 100)
        graph.add_data([(2, 2), (0, 0), (1, 3)])
        graph.draw(surface)
        line_tos = surface.named("line_to")
        assert len(line_tos) == _frame_line_count() + 2
        assert line_tos[-2:] == [(10.0, 70.0), (20.0, 80.0)]
        assert surface.named("move_to")[-2:] == [(0.0, 100.0), (10.0, 70.0)]

    def test_empty_graph_draws_axes_only(self, surface):
        graph = LineGraph("empty", 0, 100)
        graph.draw(surface)
        assert len(surface.named("line_to")) == _frame_line_count()


class TestPieChart:
    DATA = [("Bus", 0.25), ("Walk", 0.5), ("Car", 0.25)]

    def test_sorted_descending_stable(self):
        pie = PieChart("t", 100, 100, 50)
        pie.add_data(self.DATA)
        assert pie.data == [("Walk", 0.5), ("Bus", 0.25), ("Car", 0.25)]

    def test_legend_labels(self):
        pie = PieChart("t", 100, 100, 50)
        pie.add_data([("A", 1 / 3), ("B", 2 / 3)])
        assert pie.legend_labels() == ["B (66.67%)", "A (33.33%)"]

    def test_wedges_start_at_top_and_sweep_clockwise(self, surface):
        pie = PieChart("t", 100, 100, 50)
        pie.add_data(self.DATA)
        pie.draw(surface)
        wedges = [args for args in surface.named("ellipse") if args[2] == 50]
        assert len(wedges) == 3
        start = -math.pi / 2
        for (_, _, _, _, _, a0, a1), proportion in zip(wedges, (0.5, 0.25, 0.25)):
            assert a0 == pytest.approx(start)
            assert a1 == pytest.approx(start + 2 * math.pi * proportion)
            start = a1
        assert start == pytest.approx(3 * math.pi / 2)

    def test_wedges_cycle_palette(self, surface):
        pie = PieChart("t", 100, 100, 50)
        pie.add_data([(str(i), 1 / 6) for i in range(6)])
        pie.draw(surface)
        styles = [args[0] for args in surface.named("set_fill_style")]
        assert styles.count("rgb(66, 135, 245)") >= 2

    def test_legend_text_drawn(self, surface):
        pie = PieChart("t", 100, 100, 50)
        pie.add_data(self.DATA)
        pie.draw(surface)
        texts = [args[0] for args in surface.named("fill_text")]
        assert "Walk (50.00%)" in texts
        assert "Car (25.00%)" in texts

    def test_invalid_entries(self):
        pie = PieChart("t", 0, 0, 10)
        with pytest.raises(ValueError, match="non-negative"):
            pie.add_data([("A", -0.1)])
        with pytest.raises(ValueError, match="label, proportion"):
            pie.add_data([("A", 0.5, "extra")])

    def test_radius_must_be_positive(self):
        with pytest.raises(ValueError):
            PieChart("t", 0, 0, 0)


class TestBarChart:
    def test_defaults(self):
        bars = BarChart("t", 0, 0)
        assert bars.x_axis.title == "Season"
        assert (bars.x_axis.tick_spacing, bars.x_axis.tick_count) == (60, 4)
        assert bars.y_axis.title == "Percentage"
        assert bars.y_axis.value_spacing == 25

    def test_bar_geometry(self):
        bars = BarChart("t", 50, 300)
        assert bars.bar_rect(0, 50) == (65.0, 180.0, 30.0, 120.0)
        assert bars.bar_rect(2, 25) == (185.0, 240.0, 30.0, 60.0)

    def test_bars_drawn_in_input_order(self, surface):
        bars = BarChart("Rain", 50, 300)
        bars.add_data([("Summer", 10), ("Winter", 75), ("Spring", 40)])
        bars.draw(surface)
        rects = surface.named("fill_rect")
        assert len(rects) == 3
        assert [r[3] for r in rects] == pytest.approx([24.0, 180.0, 96.0])
        labels = [args for args in surface.named("fill_text") if args[2] == 315.0]
        assert [a[0] for a in labels] == ["Summer", "Winter", "Spring"]

    def test_too_many_categories_warns(self, surface, caplog):
        caplog.set_level(logging.WARNING)
        bars = BarChart("t", 0, 300)
        bars.set_x("Month", 40, 2)
        bars.add_data([("a", 1), ("b", 2), ("c", 3)])
        bars.draw(surface)
        assert any("only 2 x ticks" in rec.message for rec in caplog.records)

    def test_anchor(self):
        assert BarChart("t", 5, 6).anchor == Point(5, 6)
