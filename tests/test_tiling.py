import math

import pytest

from core.exceptions import InvalidConfigurationError
from core.tiling import FilledRect, TilingConfig, grid_shape, render, should_redraw

LIGHT = '#F9E8D1'
DARK = '#EBCDA6'


@pytest.fixture
def tiling():
    return TilingConfig(color_a=LIGHT, color_b=DARK, cell_size=64.0)


def test_two_cells_side_by_side(tiling):
    rects = render(128, 64, tiling)
    assert rects == [
        FilledRect(0, 0, 64, 64, LIGHT),
        FilledRect(64, 0, 64, 64, DARK),
    ]


@pytest.mark.parametrize("width,height,cell_size", [
    (128, 64, 64.0),
    (100, 100, 64.0),
    (65, 1, 64.0),
    (390, 844, 64.0),
    (10, 7, 2.5),
    (0, 500, 64.0),
    (500, 0, 64.0),
])
def test_rect_count_covers_surface(width, height, cell_size):
    config = TilingConfig(LIGHT, DARK, cell_size)
    rects = render(width, height, config)
    assert len(rects) == math.ceil(width / cell_size) * math.ceil(height / cell_size)


def test_last_row_and_column_overhang_surface(tiling):
    rects = render(100, 70, tiling)
    assert len(rects) == 4
    right = max(r.x + r.width for r in rects)
    bottom = max(r.y + r.height for r in rects)
    assert (right, bottom) == (128, 128)


def test_rows_are_emitted_top_to_bottom_left_to_right(tiling):
    rects = render(192, 128, tiling)
    positions = [(r.y, r.x) for r in rects]
    assert positions == sorted(positions)
    assert positions[0] == (0, 0)
    assert positions[3] == (64, 0)


def test_neighbours_alternate_and_diagonals_match(tiling):
    rects = render(320, 256, tiling)
    colors = {(int(r.y // 64), int(r.x // 64)): r.color for r in rects}
    for (row, col), color in colors.items():
        for neighbour in ((row + 1, col), (row, col + 1)):
            if neighbour in colors:
                assert colors[neighbour] != color
        for diagonal in ((row + 1, col + 1), (row + 1, col - 1)):
            if diagonal in colors:
                assert colors[diagonal] == color


@pytest.mark.parametrize("width,height", [(64, 64), (1, 1), (30.5, 64)])
def test_surface_within_one_cell_gives_single_first_color(tiling, width, height):
    rects = render(width, height, tiling)
    assert rects == [FilledRect(0, 0, 64, 64, LIGHT)]


def test_empty_surface_gives_nothing(tiling):
    assert render(0, 0, tiling) == []


def test_negative_dimensions_are_treated_as_empty(tiling):
    assert render(-10, 200, tiling) == []
    assert render(200, -1, tiling) == []
    assert grid_shape(-5, -5, 64.0) == (0, 0)


@pytest.mark.parametrize("cell_size", [0, 0.0, -1, -64.0, float('nan'), float('inf'), True, '64'])
def test_non_positive_cell_size_is_rejected(cell_size):
    with pytest.raises(InvalidConfigurationError) as exc_info:
        render(100, 100, TilingConfig(LIGHT, DARK, cell_size))
    assert exc_info.value.field == "cell_size"


def test_render_checks_cell_size_of_foreign_configs():
    class Loose:
        color_a = LIGHT
        color_b = DARK
        cell_size = 0

    with pytest.raises(InvalidConfigurationError):
        render(10, 10, Loose())


def test_configs_compare_by_value():
    assert TilingConfig(LIGHT, DARK, 32.0) == TilingConfig(LIGHT, DARK, 32.0)
    assert TilingConfig(LIGHT, DARK) == TilingConfig(LIGHT, DARK, 64.0)


def test_config_is_immutable(tiling):
    with pytest.raises(AttributeError):
        tiling.cell_size = 10


def test_no_redraw_for_same_config(tiling):
    assert should_redraw(tiling, tiling) is False
    assert should_redraw(tiling, TilingConfig(LIGHT, DARK, 64.0)) is False


@pytest.mark.parametrize("changed", [
    TilingConfig('#000000', DARK, 64.0),
    TilingConfig(LIGHT, '#000000', 64.0),
    TilingConfig(LIGHT, DARK, 32.0),
])
def test_redraw_when_any_field_changes(tiling, changed):
    assert should_redraw(tiling, changed) is True


def test_redraw_without_previous_config(tiling):
    assert should_redraw(None, tiling) is True
    assert should_redraw("something else", tiling) is True
