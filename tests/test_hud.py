from mmobattle.hud import DISPLAY_TIME, SPEED, HUDElement, PopUpHUDElement


class FakeFont:
    def __init__(self):
        self.rendered = []

    def render(self, text, antialias, color):
        self.rendered.append((text, color))
        return ("surface", text)


class FakeScreen:
    def __init__(self):
        self.blits = []

    def blit(self, surface, position):
        self.blits.append((surface, (position.x, position.y)))


def test_renders_joined_text_on_creation():
    font = FakeFont()
    el = HUDElement(font, "HP", "100", (10, 10))
    assert el.surface == ("surface", "HP: 100")
    assert font.rendered[-1][1] == (255, 255, 255, 255)


def test_set_value_rerenders():
    font = FakeFont()
    el = HUDElement(font, "HP", "100", (10, 10))
    el.set_value("55")
    assert el.text == "HP: 55"
    assert el.surface == ("surface", "HP: 55")


def test_without_font_there_is_no_surface():
    el = HUDElement(None, "Label", "", (0, 0))
    assert el.surface is None
    assert el.text == "Label"


def test_set_position_keeps_size():
    el = HUDElement(None, "x", "", (1, 2, 30, 40))
    el.set_position((7, 8))
    assert (el.position.x, el.position.y) == (7, 8)
    assert el.position.size == (30, 40)


def test_update_with_value_sets_and_draws():
    font = FakeFont()
    screen = FakeScreen()
    el = HUDElement(font, "HP", "1", (5, 6))
    el.update(0, "2", screen)
    assert el.value == "2"
    assert screen.blits == [(("surface", "HP: 2"), (5, 6))]


def test_update_with_empty_value_keeps_value():
    el = HUDElement(FakeFont(), "HP", "9", (0, 0))
    el.update(0, "", None)
    assert el.value == "9"


def test_hidden_popup_does_not_move_or_draw():
    screen = FakeScreen()
    pop = PopUpHUDElement(FakeFont(), "", "5", (10, 100))
    pop.update(0, "", screen)
    assert pop.position.y == 100
    assert screen.blits == []


def test_popup_rises_for_display_time_then_stops():
    screen = FakeScreen()
    pop = PopUpHUDElement(FakeFont(), "", "5", (10, 100))
    pop.show()
    assert pop.timer == DISPLAY_TIME
    for frame in range(DISPLAY_TIME + 5):
        pop.update(frame, "", screen)
    assert pop.timer == 0
    assert pop.position.y == 100 - SPEED * DISPLAY_TIME
    assert len(screen.blits) == DISPLAY_TIME