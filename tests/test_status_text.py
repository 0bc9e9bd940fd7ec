from svg_carousel import constants
from svg_carousel.carousel import CarouselState, Command
from svg_carousel.status_text import build_help_text, build_status_text


def test_status_text_shows_position_and_name():
    state = CarouselState(["/art/one.svg", "/art/two.svg", "/art/three.svg"])
    assert build_status_text(state) == "(1/3)  one.svg"

    state.dispatch(Command.CHANGE_TO_END)
    assert build_status_text(state) == "(3/3)  three.svg"


def test_status_text_for_empty_collection():
    assert build_status_text(CarouselState()) == constants.EMPTY_PLACEHOLDER


def test_help_text_lists_every_binding():
    text = build_help_text()
    for label in ("Start", "Left", "Right", "End", "Quit", "<H>", "<L>", "<ESC>", "<Q>", "<SHIFT>"):
        assert label in text
    assert text.count(" | ") == 4
