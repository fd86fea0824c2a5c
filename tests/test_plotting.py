import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402

from learning_curves.config import PlotStyle  # noqa: E402
from learning_curves.errors import ConfigError  # noqa: E402
from learning_curves.plotting import plot_block_summary, plot_delta, plot_unit_curve  # noqa: E402


def test_unit_curve_single_model():
    fig = plot_unit_curve(100, 1, 125, 0.85)
    assert isinstance(fig, Figure)
    ax = fig.axes[0]
    assert len(ax.get_lines()) == 1
    assert ax.get_lines()[0].get_ydata()[-1] == pytest.approx(32.23647, abs=1e-5)


def test_unit_curve_both_models_cumulative():
    fig = plot_unit_curve(100, 1, 125, 0.85, model="both", level="cumulative")
    lines = fig.axes[0].get_lines()
    assert [ln.get_label() for ln in lines] == ["unit model", "ca model"]
    assert lines[0].get_ydata()[-1] == pytest.approx(5201.085, abs=1e-3)


def test_unit_curve_rejects_unknown_level():
    with pytest.raises(ConfigError):
        plot_unit_curve(100, 1, 125, 0.85, level="u")


def test_block_summary_annotation(tmp_path):
    fig = plot_block_summary(125, 201, 500, 0.75)
    ax = fig.axes[0]
    assert [t.get_text() for t in ax.texts] == ["[335, 101]"]
    out = tmp_path / "block.png"
    fig.savefig(out)
    assert out.exists()


def test_delta_points_only_for_short_blocks():
    short = plot_delta(50, 1, 25, 0.885)
    long = plot_delta(50, 1, 250, 0.885)
    assert len(short.axes[0].collections) == 1
    assert len(long.axes[0].collections) == 0


def test_style_is_validated():
    with pytest.raises(ConfigError):
        plot_delta(50, 1, 25, 0.885, style=PlotStyle(width=0))
