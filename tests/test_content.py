import math

import pytest

from ntrade.content import (
    BuilderWidget,
    Divider,
    Flexible,
    Image,
    Orientation,
    ProgressBar,
    Text,
    builder,
    divider,
    flexible,
    image,
    progress_bar,
    text,
)
from ntrade.rendering import canvas_to_string

WARNING = (
    "This application is provided without any warranty. "
    "Make sure you have backups of your save files before using it!"
)


def rows(canvas):
    return ["".join(row) for row in canvas]


# Text


def test_text_min_size_without_wrapping():
    assert text("Hello").min_size() == (len("Hello"), 1)


def test_empty_text_is_one_empty_line():
    assert text("").min_size() == (0, 1)


def test_text_render_pads_to_width():
    out = rows(text("Hi").render(5, 2))
    assert out[0] == "Hi".ljust(5)
    assert out[1] == " " * 5


def test_text_render_clips_width_and_height():
    out = rows(text("abcdef").render(3, 1))
    assert out == ["abc"]


def test_wrapped_lines_respect_max_width_and_keep_words():
    t = text(WARNING).max_width(40)
    lines = t.wrapped_lines()
    assert all(len(line) <= 40 for line in lines)
    assert " ".join(lines).split() == WARNING.split()
    assert len(lines) > 1


def test_wrapped_lines_are_greedy():
    lines = text(WARNING).max_width(40).wrapped_lines()
    for line, following in zip(lines, lines[1:]):
        assert len(line) + 1 + len(following.split()[0]) > 40


def test_long_word_is_not_split():
    t = text("supercalifragilistic ok").max_width(5)
    assert t.wrapped_lines() == ["supercalifragilistic", "ok"]


def test_wrapping_empty_text_has_no_lines():
    assert text("   ").max_width(10).min_size() == (0, 0)


def test_wrapped_min_size_matches_lines():
    t = text(WARNING).max_width(40)
    lines = t.wrapped_lines()
    assert t.min_size() == (max(map(len, lines)), len(lines))


def test_max_width_returns_same_text():
    t = Text("x")
    assert t.max_width(3) is t


# Image


def test_image_min_size_uses_longest_line():
    assert image("ab\nabcd\na").min_size() == (4, 3)


def test_image_leading_newline_counts_as_line():
    assert image("\nxy").min_size() == (2, 2)


def test_image_trailing_newline_does_not_add_line():
    assert image("xy\n").min_size() == (2, 1)


def test_empty_image():
    assert Image("").min_size() == (0, 0)


def test_image_render_round_trip():
    art = "/\\\n\\/"
    w, h = image(art).min_size()
    assert canvas_to_string(image(art).render(w, h)) == art


def test_image_render_clips():
    out = rows(image("abc\ndef\nghi").render(2, 2))
    assert out == ["ab", "de"]


# Divider


def test_horizontal_divider_single_row():
    assert rows(divider("-").render(4, 3)) == ["----"]


def test_vertical_divider_in_middle_column():
    d = divider("|").vertical()
    assert d.orientation is Orientation.VERTICAL
    out = rows(d.render(5, 2))
    assert all(line == "  |  " for line in out)
    assert len(out) == 2


def test_vertical_divider_narrow():
    assert rows(Divider("|").vertical().render(1, 3)) == ["|", "|", "|"]


def test_divider_min_size():
    assert divider("=").min_size() == (1, 1)


# ProgressBar


def test_progress_bar_argument_order():
    bar = progress_bar(0.5, "/", "|", " ")
    assert (bar.foreground, bar.tip, bar.background) == ("/", "|", " ")


def test_progress_bar_min_size():
    assert ProgressBar(0.1, ".", "#", ">").min_size() == (5, 1)


@pytest.mark.parametrize("fraction", [0.1, 0.32, 0.5, 0.68, 0.99])
def test_progress_bar_partial_fill(fraction):
    width = 20
    out = rows(progress_bar(fraction, "/", "|", " ").render(width, 2))
    active = math.floor(width * fraction)
    for line in out:
        assert len(line) == width
        assert line[: active - 1] == "/" * (active - 1)
        assert line[active - 1] == "|"
        assert line[active:] == " " * (width - active)


def test_progress_bar_full_has_no_tip():
    out = rows(progress_bar(1.0, "/", "|", " ").render(6, 1))
    assert out == ["/" * 6]


def test_progress_bar_clamps():
    assert rows(progress_bar(-2.0, "/", "|", ".").render(4, 1)) == ["." * 4]
    assert rows(progress_bar(7.0, "/", "|", ".").render(4, 1)) == ["/" * 4]


# Flexible and builder


def test_flexible_delegates_to_child():
    child = text("abc")
    f = flexible(2, child)
    assert f.flex_factor() == 2
    assert f.min_size() == child.min_size()
    assert f.render(4, 1) == child.render(4, 1)


def test_flexible_class():
    assert Flexible(1, text("x")).flex_factor() == 1


def test_builder_rebuilds_every_time():
    state = {"label": "one"}
    b = builder(lambda: text(state["label"]))
    assert b.min_size() == (len("one"), 1)
    state["label"] = "three"
    assert b.min_size() == (len("three"), 1)
    assert rows(b.render(5, 1)) == ["three"]


def test_builder_widget_calls_factory():
    calls = []

    def factory():
        calls.append(1)
        return text("z")

    bw = BuilderWidget(factory)
    bw.render(1, 1)
    bw.min_size()
    assert len(calls) == 2
    assert bw.flex_factor() is None