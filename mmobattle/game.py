"""The battle scene: renderers, game state and the interactive entry point."""

from __future__ import annotations

import argparse
import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

import pygame

from .character import Character, Monster, Player
from .hud import HUDElement
from .model import Direction, Model
from .vec3 import FPS

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
WINDOW_TITLE = "MMO Battle!"
FONT_PATH = "assets/fonts/Ldfcomicsans-jj7l.ttf"
FONT_SIZE = 24

BACKGROUND_COLOR = (255, 184, 184)
QUAD_RECT = (SCREEN_WIDTH // 4, SCREEN_HEIGHT // 4, SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)
QUAD_CORNERS = {
    (0, 0): (0, 0, 255),  # top left
    (1, 0): (255, 255, 0),  # top right
    (0, 1): (255, 0, 0),  # bottom left
    (1, 1): (0, 255, 0),  # bottom right
}
MODEL_SIZE = 20
MODEL_COLOR = (40, 40, 160)

DEATH_TEXT = "You Died, Press R to try again."
WIN_TEXT = "You Won!, Press R to play again."
RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)

_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.FORWARDS,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_DOWN: Direction.BACKWARDS,
    pygame.K_LEFT: Direction.LEFT,
}


class GraphicsAPI(ABC):
    """Interface of a backend able to draw models."""

    @abstractmethod
    def initialize(self) -> bool:
        """Prepare the backend; return whether it is ready."""

    @abstractmethod
    def show_info(self) -> str:
        """Report information about the backend and return it."""

    @abstractmethod
    def create_graphics_pipeline(self, vertex_code: str, frag_code: str) -> None:
        """Set up the drawing pipeline from vertex and fragment programs."""

    @abstractmethod
    def draw_model(self, model: Model) -> None:
        """Draw a single model."""


class PygameRenderer(GraphicsAPI):
    """Draws models as squares onto a pygame surface."""

    def __init__(
        self,
        surface: pygame.Surface | None = None,
        model_color: tuple[int, int, int] = MODEL_COLOR,
    ) -> None:
        self.surface = surface
        self.model_color = model_color
        self.shaders: tuple[str, str] | None = None

    def initialize(self) -> bool:
        try:
            pygame.init()
            pygame.font.init()
            if self.surface is None:
                self.surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
                pygame.display.set_caption(WINDOW_TITLE)
        except pygame.error as exc:
            print(f"Window couldn't be created! SDL Error: {exc}")
            return False
        return True

    def show_info(self) -> str:
        """Print the library, SDL and video driver versions and return the text."""
        lines = [
            f"pygame: {pygame.version.ver}",
            "SDL: {}.{}.{}".format(*pygame.get_sdl_version()),
        ]
        if pygame.display.get_init():
            lines.append(f"Video driver: {pygame.display.get_driver()}")
        if self.surface is not None:
            width, height = self.surface.get_size()
            lines.append(f"Surface: {width}x{height}")
        info = "\n".join(lines)
        print(info)
        return info

    def create_graphics_pipeline(self, vertex_code: str, frag_code: str) -> None:
        self.shaders = (vertex_code, frag_code)

    def draw_model(self, model: Model) -> None:
        if self.surface is None:
            return
        rect = pygame.Rect(0, 0, MODEL_SIZE, MODEL_SIZE)
        rect.center = (SCREEN_WIDTH // 2 + model.x, SCREEN_HEIGHT // 2 + model.z)
        self.surface.fill(self.model_color, rect)


def _draw_scene(screen: pygame.Surface) -> None:
    screen.fill(BACKGROUND_COLOR)
    corners = pygame.Surface((2, 2), 0, 32)
    for pos, color in QUAD_CORNERS.items():
        corners.set_at(pos, color)
    x, y, width, height = QUAD_RECT
    screen.blit(pygame.transform.smoothscale(corners, (width, height)), (x, y))


class Battle:
    """A player facing a single monster, advanced one frame at a time."""

    def __init__(self, font: Any = None, renderer: GraphicsAPI | None = None) -> None:
        self.player: Character = Player(
            100, 50, 10, 10, 10, 5, 5, 5, "assets/gfx/Player.png", font, []
        )
        self.monster: Monster = Monster(
            20, 0, 30, 10, 5, "assets/gfx/Monster.png", font, 10, 45, 0, 0, 50
        )
        self.renderer = renderer
        if renderer is not None:
            self.player.model.api = renderer
            self.monster.model.api = renderer
        self.hud_hp = HUDElement(font, "HP", str(self.player.hp), (10, 10))
        centre = (SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2, 0, 0)
        self.death_message = HUDElement(font, DEATH_TEXT, "", centre, RED)
        self.win_message = HUDElement(font, WIN_TEXT, "", centre, GREEN)
        self.frame = 0
        self.target = self.player.model.screen_space_pos()
        self.clicked = False
        self.holding = False

    def press(self, direction: Direction) -> None:
        """Move the player one step in the direction."""
        self.player.model.move(direction)

    def release(self, direction: Direction) -> None:
        """Stop the player's movement along the direction's axis."""
        self.player.model.stop(direction)

    def reset(self) -> None:
        """Heal both combatants and put them back at their starting places."""
        self.player.take_damage(-100)
        self.player.model.x = 0
        self.player.model.y = 0
        self.player.model.z = 0
        self.monster.take_damage(-20)
        self.monster.model.x = 0
        self.monster.model.y = 0
        self.monster.model.z = 50

    def step(self, screen: pygame.Surface | None) -> None:
        """Run one frame of combat and draw it onto the screen, if any."""
        self.monster.check_player_proximity(self.player)
        if screen is not None:
            _draw_scene(screen)
        self.player.update(self.frame, screen)
        self.monster.update(self.frame, screen)
        self.hud_hp.update(self.frame, str(self.player.hp), screen)
        if not self.player.hp:
            self.death_message.update(self.frame, "", screen)
        if not self.monster.hp:
            self.win_message.update(self.frame, "", screen)
        self.frame += 1


def _handle_event(battle: Battle, event: pygame.event.Event) -> bool:
    """Apply one input event to the battle; return True when asked to quit."""
    if event.type == pygame.QUIT:
        return True
    if event.type == pygame.KEYDOWN:
        if event.key in _KEY_DIRECTIONS:
            battle.press(_KEY_DIRECTIONS[event.key])
        elif event.key == pygame.K_r:
            battle.reset()
    elif event.type == pygame.KEYUP:
        if event.key in _KEY_DIRECTIONS:
            battle.release(_KEY_DIRECTIONS[event.key])
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        battle.target = tuple(event.pos)
        battle.clicked = True
        battle.holding = True
    elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
        battle.holding = False
    return False


def main(argv: Sequence[str] | None = None) -> int:
    """Open the battle window and run until it is closed."""
    parser = argparse.ArgumentParser(description="A small real-time battle.")
    parser.add_argument("--font", default=FONT_PATH, help="TrueType font file")
    parser.add_argument(
        "--frames", type=int, default=0, help="stop after this many frames (0: never)"
    )
    args = parser.parse_args(argv)

    print("Initializing pygame!")
    renderer = PygameRenderer()
    if not renderer.initialize():
        pygame.quit()
        return 1
    try:
        renderer.show_info()
        print("Creating Font!")
        try:
            font = pygame.font.Font(args.font, FONT_SIZE)
        except (OSError, pygame.error) as exc:
            print(f"Failed to load font: {exc}", file=sys.stderr)
            return 1

        print("Creating Units!")
        battle = Battle(font, renderer)
        clock = pygame.time.Clock()
        print("Main Loop!")
        quit_requested = False
        while not quit_requested:
            for event in pygame.event.get():
                quit_requested = _handle_event(battle, event) or quit_requested
            battle.step(renderer.surface)
            pygame.display.flip()
            clock.tick(FPS)
            if args.frames and battle.frame >= args.frames:
                break
        return 0
    finally:
        pygame.quit()