import pytest

from asciipaint.canvas import BLANK, Canvas, canvas_size, new_canvas


def test_new_canvas_sizes_and_blank_cells():
    canvas = new_canvas(3, 4)
    assert canvas.num_rows == 3
    assert canvas.num_columns == 4
    assert len(canvas.cells) == 3 + 1
    assert all(len(row) == 4 + 1 for row in canvas.cells)
    assert all(cell == BLANK for row in canvas.cells for cell in row)


def test_new_canvas_rows_are_independent():
    canvas = new_canvas(2, 2)
    canvas.cells[0][0] = "-"
    assert canvas.cells[1][0] == BLANK


def test_canvas_size_default():
    assert canvas_size([]) == (10, 10)


def test_canvas_size_from_arguments():
    assert canvas_size(["3", "7"]) == (3, 7)


def test_canvas_size_reads_leading_digits():
    assert canvas_size(["12abc", "x"]) == (12, 0)


@pytest.mark.parametrize("argv", [["5"], ["1", "2", "3"]])
def test_canvas_size_wrong_count(argv):
    with pytest.raises(ValueError, match="Too many arguments"):
        canvas_size(argv)


def test_render_small_canvas():
    assert new_canvas(2, 2).render() == "  1  *  *\n  0  *  *\n     0  1\n"


def test_render_line_count_and_labels():
    canvas = new_canvas(4, 6)
    lines = canvas.render().splitlines()
    assert len(lines) == canvas.num_rows + 1
    labels = [int(line[:3]) for line in lines[:-1]]
    assert labels == list(range(canvas.num_rows - 1, -1, -1))
    assert lines[-1].split() == [str(c) for c in range(canvas.num_columns)]


def test_render_hides_spare_row_and_column():
    canvas = new_canvas(3, 3)
    canvas.cells[3][0] = "-"
    canvas.cells[0][3] = "|"
    text = canvas.render()
    assert "-" not in text
    assert "|" not in text


def test_render_shows_marks():
    canvas = new_canvas(3, 3)
    canvas.cells[0][2] = "/"
    first = canvas.render().splitlines()[0]
    assert first.split()[-1] == "/"


def test_shift_rows_down_adds_blank_rows_on_top():
    canvas = new_canvas(2, 3)
    canvas.cells[0][0] = "-"
    canvas.shift_rows_down(2, 3)
    assert canvas.num_rows == 4
    assert len(canvas.cells) == 4
    assert canvas.cells[0] == [BLANK] * 3
    assert canvas.cells[1] == [BLANK] * 3
    assert canvas.cells[2][0] == "-"


def test_shift_rows_up_adds_rows_at_bottom():
    canvas = Canvas(2, 2, [["-", BLANK], [BLANK, "|"]])
    canvas.shift_rows_up(1, 3)
    assert canvas.num_rows == 3
    assert canvas.num_columns == 3
    assert canvas.cells[0][0] == "-"
    assert canvas.cells[1][1] == "|"
    assert canvas.cells[2] == [BLANK] * 3
    assert all(len(row) == 3 for row in canvas.cells)