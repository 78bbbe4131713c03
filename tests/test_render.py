"""Tests for the draw-instruction canvases."""

import pytest

from snek.render import AsciiCanvas, Canvas, DrawCommand, DrawRole, RecordingCanvas


class TestCanvas:
    def test_base_canvas_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Canvas().draw_block(DrawRole.FOOD, 1, 1)

    def test_block_is_unit_rect(self):
        canvas = RecordingCanvas()
        canvas.draw_block(DrawRole.FOOD, 3, 4)
        assert canvas.commands == [DrawCommand(DrawRole.FOOD, 3, 4, 1, 1)]

    def test_recording_clear(self):
        canvas = RecordingCanvas()
        canvas.draw_rect(DrawRole.BORDER, 0, 0, 5, 1)
        canvas.clear()
        assert canvas.commands == []


class TestAsciiCanvas:
    def test_rect_and_blocks(self):
        canvas = AsciiCanvas(4, 3)
        canvas.draw_rect(DrawRole.BORDER, 0, 0, 4, 1)
        canvas.draw_block(DrawRole.SNAKE_HEAD, 1, 1)
        canvas.draw_block(DrawRole.SNAKE_BODY, 2, 1)
        canvas.draw_block(DrawRole.FOOD, 3, 2)
        assert canvas.render() == "####\n @o \n   *"

    def test_overlay_fills_only_empty_cells(self):
        canvas = AsciiCanvas(3, 1)
        canvas.draw_block(DrawRole.SNAKE_HEAD, 1, 0)
        canvas.draw_rect(DrawRole.GAME_OVER_OVERLAY, 0, 0, 3, 1)
        assert canvas.render() == "x@x"

    def test_clips_out_of_range(self):
        canvas = AsciiCanvas(2, 2)
        canvas.draw_rect(DrawRole.BORDER, -1, -1, 10, 1)
        canvas.draw_block(DrawRole.FOOD, 5, 5)
        assert canvas.render() == "  \n  "
