"""Game state machine: splash screens, menu and the running level."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, IntEnum
from typing import Any

from expopisel.enemy import Enemy
from expopisel.input import Button, InputState
from expopisel.level import MAX_LEVELS, get_level, get_screen
from expopisel.player import Player
from expopisel.timers import Timer

TILE_USER_INDEX = 16
SPLASH_SECONDS = 2
ENEMY_TURN_SECONDS = 2
FADE_IN_FRAMES = 30
SCREEN_FADE_OUT_FRAMES = 16
SPLASH_FADE_OUT_FRAMES = 32
SCREENS_BEFORE_NEXT_LEVEL = 5

LOGO_IMAGE = "logoBg"
ARC_LOGO_IMAGE = "logArc"
MENU_IMAGE = "menu"
PLAYER_SPRITE = "joaq"
ENEMY_SPRITE = "esq"

PLAYER_SPRITE_START = (400, 100)
ENEMY_START = (150, 100)
END_TEXT = "END    "
END_TEXT_POSITION = (10, 13)


class GameState(Enum):
    SPLASH1 = 0
    SPLASH2 = 1
    MENU = 2
    RUN = 3
    END = 4


class Plane(Enum):
    BG_A = "BG_A"
    BG_B = "BG_B"


class Palette(IntEnum):
    PAL0 = 0
    PAL1 = 1
    PAL2 = 2
    PAL3 = 3


class Renderer(ABC):
    """Display operations the game issues each frame."""

    @abstractmethod
    def fade_in(
        self, first: int, last: int, source: str, frames: int, asynchronous: bool
    ) -> None: ...

    @abstractmethod
    def fade_out(
        self, first: int, last: int, frames: int, asynchronous: bool
    ) -> None: ...

    @abstractmethod
    def draw_image(
        self, plane: Plane, image: str, palette: Palette, tile_index: int
    ) -> int:
        """Draw ``image`` and return the number of tiles it occupies."""

    @abstractmethod
    def set_palette(self, palette: Palette, source: str) -> None: ...

    @abstractmethod
    def add_sprite(self, definition: str, x: int, y: int, palette: Palette) -> Any:
        """Create a sprite and return a handle for it."""

    @abstractmethod
    def set_sprite_position(self, sprite: Any, x: int, y: int) -> None: ...

    @abstractmethod
    def set_sprite_animation(self, sprite: Any, animation: int) -> None: ...

    @abstractmethod
    def set_sprite_hflip(self, sprite: Any, flip: bool) -> None: ...

    @abstractmethod
    def draw_text(self, text: str, x: int, y: int) -> None: ...

    @abstractmethod
    def end_frame(self) -> None: ...


class RecordingRenderer(Renderer):
    """A renderer that keeps a list of every call made to it."""

    def __init__(self, tile_counts: dict[str, int] | None = None) -> None:
        self.tile_counts = dict(tile_counts or {})
        self.calls: list[tuple[Any, ...]] = []
        self.sprites: list[str] = []

    def fade_in(self, first, last, source, frames, asynchronous):
        self.calls.append(("fade_in", first, last, source, frames, asynchronous))

    def fade_out(self, first, last, frames, asynchronous):
        self.calls.append(("fade_out", first, last, frames, asynchronous))

    def draw_image(self, plane, image, palette, tile_index):
        self.calls.append(("draw_image", plane, image, palette, tile_index))
        return self.tile_counts.get(image, 0)

    def set_palette(self, palette, source):
        self.calls.append(("set_palette", palette, source))

    def add_sprite(self, definition, x, y, palette):
        self.calls.append(("add_sprite", definition, x, y, palette))
        self.sprites.append(definition)
        return len(self.sprites) - 1

    def set_sprite_position(self, sprite, x, y):
        self.calls.append(("set_sprite_position", sprite, x, y))

    def set_sprite_animation(self, sprite, animation):
        self.calls.append(("set_sprite_animation", sprite, animation))

    def set_sprite_hflip(self, sprite, flip):
        self.calls.append(("set_sprite_hflip", sprite, flip))

    def draw_text(self, text, x, y):
        self.calls.append(("draw_text", text, x, y))

    def end_frame(self):
        self.calls.append(("end_frame",))

    def named(self, name: str) -> list[tuple[Any, ...]]:
        """The recorded calls of one kind, in order."""
        return [call for call in self.calls if call[0] == name]


class Game:
    """The whole game: current state, input, player, enemy and timers."""

    def __init__(self, renderer: Renderer | None = None, pal: bool = False) -> None:
        self.renderer = renderer if renderer is not None else RecordingRenderer()
        self.pal = pal
        self.current_state = GameState.SPLASH1
        self.input_state = InputState()
        self.player = Player()
        self.enemy = Enemy()
        self.vram_index = 0
        self.level_index = 0
        self.screen_index = 0
        self.splash1_timer = Timer(SPLASH_SECONDS, self._on_splash1_timer, pal=pal)
        self.splash2_timer = Timer(SPLASH_SECONDS, self._on_splash2_timer, pal=pal)
        self.enemy_timer = Timer(
            ENEMY_TURN_SECONDS, self._on_enemy_timer, repeat=True, pal=pal
        )

    def init(self) -> None:
        """Reset input, enter the running state and select the first screen."""
        self.input_state = InputState()
        self.load_next_state(GameState.RUN)
        self.vram_index = TILE_USER_INDEX
        self.level_index = 0
        self.screen_index = 0

    def load_next_state(self, next_state: GameState) -> None:
        self.current_state = next_state
        setup = {
            GameState.SPLASH1: self._init_splash1,
            GameState.SPLASH2: self._init_splash2,
            GameState.MENU: self._init_menu,
            GameState.RUN: self._init_run,
        }.get(next_state)
        if setup is not None:
            setup()

    def _show_full_screen(self, image: str) -> None:
        self.renderer.fade_in(0, 15, image, FADE_IN_FRAMES, True)
        self.renderer.draw_image(Plane.BG_A, image, Palette.PAL0, self.vram_index)

    def _init_splash1(self) -> None:
        self._show_full_screen(LOGO_IMAGE)
        self.splash1_timer = Timer(SPLASH_SECONDS, self._on_splash1_timer, pal=self.pal)
        self.splash1_timer.start()

    def _init_splash2(self) -> None:
        self._show_full_screen(ARC_LOGO_IMAGE)
        self.splash2_timer = Timer(SPLASH_SECONDS, self._on_splash2_timer, pal=self.pal)
        self.splash2_timer.start()

    def _init_menu(self) -> None:
        self._show_full_screen(MENU_IMAGE)

    def _init_run(self) -> None:
        self.player = Player()
        self.load_screen()
        x, y = get_screen(self.level_index, self.screen_index).initial_position
        self.player.set_position(x, y)
        self.player.sprite = self.renderer.add_sprite(
            PLAYER_SPRITE, *PLAYER_SPRITE_START, Palette.PAL1
        )
        self.renderer.set_palette(Palette.PAL1, PLAYER_SPRITE)
        self.enemy = Enemy(*ENEMY_START)
        self.enemy.sprite = self.renderer.add_sprite(
            ENEMY_SPRITE, *ENEMY_START, Palette.PAL3
        )
        self.renderer.set_palette(Palette.PAL3, ENEMY_SPRITE)
        self.enemy_timer = Timer(
            ENEMY_TURN_SECONDS, self._on_enemy_timer, repeat=True, pal=self.pal
        )
        self.enemy_timer.start()

    def _on_splash1_timer(self) -> None:
        self.renderer.fade_out(0, 16, SPLASH_FADE_OUT_FRAMES, True)
        self.load_next_state(GameState.SPLASH2)

    def _on_splash2_timer(self) -> None:
        self.renderer.fade_out(0, 16, SPLASH_FADE_OUT_FRAMES, True)
        self.load_next_state(GameState.MENU)

    def _on_enemy_timer(self) -> None:
        self.enemy.turn_around()

    def load_screen(self) -> None:
        """Draw the current screen's images and fade in its palette."""
        get_level(self.level_index)
        screen = get_screen(self.level_index, self.screen_index)
        if screen.foreground is None:
            raise ValueError(
                f"screen {self.screen_index} of level {self.level_index} has no foreground"
            )
        index = TILE_USER_INDEX
        if screen.background is not None:
            index += self.renderer.draw_image(
                Plane.BG_B, screen.background, Palette.PAL0, index
            )
        self.renderer.draw_image(Plane.BG_A, screen.foreground, Palette.PAL2, index)
        self.renderer.fade_in(32, 47, screen.foreground, FADE_IN_FRAMES, True)

    def update_splash1(self) -> None:
        self.splash1_timer.update()

    def update_splash2(self) -> None:
        self.splash2_timer.update()

    def update_game_run(self) -> None:
        self.player.update_run(self.input_state, self.level_index, self.screen_index)
        self.enemy.update(self.level_index, self.screen_index)
        self.enemy_timer.update()

    def _take_start(self) -> bool:
        if self.input_state.is_pressed(Button.START):
            return True
        return False

    def _advance_screen(self) -> None:
        self.renderer.fade_out(32, 47, SCREEN_FADE_OUT_FRAMES, False)
        self.screen_index += 1
        if self.screen_index >= SCREENS_BEFORE_NEXT_LEVEL:
            self.screen_index = 0
            self.level_index += 1
            if self.level_index >= MAX_LEVELS:
                self.level_index = 0
        self.load_screen()
        x, y = get_screen(self.level_index, self.screen_index).initial_position
        self.player.set_position(x, y)
        self.input_state.reset(Button.START)

    def update(self, joypad: int) -> None:
        """Read the joypad and run one frame of the current state's logic."""
        self.input_state.update(joypad)
        state = self.current_state
        if state is GameState.SPLASH1:
            self.update_splash1()
        elif state is GameState.SPLASH2:
            self.update_splash2()
        elif state is GameState.MENU:
            if self._take_start():
                self.load_next_state(GameState.RUN)
                self.input_state.reset(Button.START)
        elif state is GameState.RUN:
            self.update_game_run()
            if self._take_start():
                self._advance_screen()
        elif state is GameState.END:
            if self._take_start():
                self.load_next_state(GameState.SPLASH1)
                self.input_state.reset(Button.START)

    def draw(self) -> None:
        if self.current_state is GameState.RUN:
            self.draw_game_run()
        elif self.current_state is GameState.END:
            self.renderer.draw_text(END_TEXT, *END_TEXT_POSITION)

    def draw_game_run(self) -> None:
        position = self.player.entity.position
        self.renderer.set_sprite_position(self.player.sprite, position.x, position.y)
        self.renderer.set_sprite_animation(self.player.sprite, int(self.player.direction))
        enemy_position = self.enemy.entity.position
        self.renderer.set_sprite_position(
            self.enemy.sprite, enemy_position.x, enemy_position.y
        )
        self.renderer.set_sprite_hflip(self.enemy.sprite, bool(self.enemy.direction))

    def handle_input_event(self, joy: int, changed: int, status: int) -> None:
        self.input_state.handle_event(joy, changed, status)

    def frame(self, joypad: int) -> None:
        """Run one full frame: update, draw and finish the frame."""
        self.update(joypad)
        self.draw()
        self.renderer.end_frame()