import pytest

from ohmmeter.font import glyph
from ohmmeter.ssd1306 import SSD1306, Command


class Recorder:
    def __init__(self):
        self.writes = []

    def __call__(self, address, data):
        self.writes.append((address, bytes(data)))


@pytest.fixture
def bus():
    return Recorder()


@pytest.fixture
def display(bus):
    return SSD1306(bus)


def lit(display):
    return {
        (x, y)
        for x in range(display.width)
        for y in range(display.height)
        if display.get_pixel(x, y)
    }


def test_new_buffer_is_blank_with_data_prefix(display):
    assert display.buffer[0] == 0x40
    assert len(display.buffer) == 128 * 8 + 1
    assert not any(display.buffer[1:])


def test_command_writes_prefix_and_byte(display, bus):
    display.command(Command.SET_CONTRAST)
    assert bus.writes == [(0x3C, bytes([0x80, 0x81]))]
    assert display.buffer[0] == 0x40
    assert sum(display.buffer[1:]) == 0


def test_config_starts_off_and_ends_on(display, bus):
    display.config()
    sent = [data[1] for _, data in bus.writes]
    assert all(data[0] == 0x80 for _, data in bus.writes)
    assert sent[0] == Command.SET_DISP
    assert sent[-1] == Command.SET_DISP | 0x01
    assert sent[sent.index(Command.SET_MUX_RATIO) + 1] == display.height - 1


def test_send_data_sets_window_then_sends_buffer(display, bus):
    display.pixel(5, 5, True)
    display.send_data()
    commands = [data[1] for _, data in bus.writes[:-1]]
    assert commands == [
        Command.SET_COL_ADDR, 0, display.width - 1,
        Command.SET_PAGE_ADDR, 0, display.pages - 1,
    ]
    assert bus.writes[-1] == (0x3C, display.buffer)


def test_custom_address_is_used(bus):
    display = SSD1306(bus, address=0x3D)
    display.command(0)
    assert bus.writes[0][0] == 0x3D


def test_pixel_round_trip(display):
    display.pixel(10, 20, True)
    assert display.get_pixel(10, 20)
    assert lit(display) == {(10, 20)}
    display.pixel(10, 20, False)
    assert lit(display) == set()


def test_origin_pixel_is_low_bit_of_first_data_byte(display):
    display.pixel(0, 0, True)
    assert display.buffer[1] == 0x01


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (128, 0), (0, 64)])
def test_pixel_out_of_range(display, x, y):
    with pytest.raises(IndexError):
        display.pixel(x, y, True)


def test_fill_sets_and_clears_everything(display):
    display.fill(True)
    assert all(b == 0xFF for b in display.buffer[1:])
    assert display.buffer[0] == 0x40
    display.fill(False)
    assert not any(display.buffer[1:])


def test_rect_outline(display):
    display.rect(3, 3, 122, 60, True, False)
    pixels = lit(display)
    assert {(3, 3), (124, 3), (3, 62), (124, 62)} <= pixels
    assert (60, 30) not in pixels
    assert len(pixels) == 2 * 122 + 2 * 60 - 4


def test_rect_filled(display):
    display.rect(2, 4, 5, 6, True, True)
    assert lit(display) == {(x, y) for x in range(4, 9) for y in range(2, 8)}


def test_line_horizontal_matches_hline(bus):
    a = SSD1306(bus)
    b = SSD1306(bus)
    a.line(3, 37, 123, 37, True)
    b.hline(3, 123, 37, True)
    assert a.buffer == b.buffer


def test_line_vertical_matches_vline(bus):
    a = SSD1306(bus)
    b = SSD1306(bus)
    a.line(44, 37, 44, 60, True)
    b.vline(44, 37, 60, True)
    assert a.buffer == b.buffer


def test_line_diagonal(display):
    display.line(10, 10, 0, 0, True)
    assert lit(display) == {(i, i) for i in range(11)}


def test_line_has_endpoints_and_one_pixel_per_column(display):
    display.line(0, 0, 20, 7, True)
    pixels = lit(display)
    assert (0, 0) in pixels and (20, 7) in pixels
    assert sorted(x for x, _ in pixels) == list(range(21))


def test_draw_char_matches_glyph(display):
    display.draw_char("A", 8, 16)
    for i, column in enumerate(glyph("A")):
        for j in range(8):
            assert display.get_pixel(8 + i, 16 + j) == bool(column & (1 << j))


def test_draw_char_clears_background(display):
    display.fill(True)
    display.draw_char(" ", 0, 0)
    assert not any(display.get_pixel(x, y) for x in range(8) for y in range(8))


def test_draw_string_places_characters_side_by_side(bus):
    whole = SSD1306(bus)
    whole.draw_string("Hi", 0, 0)
    parts = SSD1306(bus)
    parts.draw_char("H", 0, 0)
    parts.draw_char("i", 8, 0)
    assert whole.buffer == parts.buffer


def test_draw_string_wraps_to_next_row(bus):
    whole = SSD1306(bus)
    whole.draw_string("AB", 112, 0)
    parts = SSD1306(bus)
    parts.draw_char("A", 112, 0)
    parts.draw_char("B", 0, 8)
    assert whole.buffer == parts.buffer


def test_draw_string_stops_at_bottom(bus):
    whole = SSD1306(bus)
    whole.draw_string("ABC", 112, 48)
    parts = SSD1306(bus)
    parts.draw_char("A", 112, 48)
    assert whole.buffer == parts.buffer