"""
Renderer — Side-on cutaway of the house
========================================
Draws one frame per loop iteration from the simulation context:
  - Three floors (bedroom, living room, kitchen) and two stairwells
  - Furniture at every room location
  - The inhabitant (facing, walk cycle, asleep in bed)
  - The dog with its tail wag
  - Day/night tint from the clock
  - HUD strip: mood, activity, time, hunger/energy bars, last message

The renderer only reads state. Keys F/L/M/G go through the engine's
interaction methods; ESC quits.
"""

import math
from typing import Tuple

import pygame

from dollhouse.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_SCALE, FPS, HUD_HEIGHT,
)
from dollhouse.agent.animal import CompanionBehavior
from dollhouse.world.locations import ROOM, PET
from dollhouse.engine.loop import SimulationEngine

Color = Tuple[int, int, int]

COLORS = {
    "sky":          (28, 32, 64),
    "wall_3":       (196, 170, 196),
    "wall_2":       (214, 196, 150),
    "wall_1":       (170, 196, 180),
    "floor_board":  (120, 80, 48),
    "roof":         (150, 50, 40),
    "stairs":       (150, 110, 70),
    "furniture":    (90, 60, 40),
    "tv_screen":    (80, 160, 220),
    "skin":         (240, 200, 160),
    "shirt":        (60, 90, 200),
    "trousers":     (50, 50, 70),
    "dog":          (170, 120, 70),
    "dog_dark":     (110, 75, 40),
    "water":        (72, 120, 168),
    "hud_bg":       (24, 24, 32),
    "hud_text":     (235, 235, 220),
    "hud_dim":      (150, 150, 140),
    "bar_bg":       (60, 60, 60),
    "bar_good":     (90, 200, 90),
    "bar_low":      (220, 70, 60),
    "night":        (10, 10, 40),
}

# Floor bands on the canvas: (top, bottom) in pixels
FLOOR_BANDS = {
    3: (70, 140),
    2: (170, 250),
    1: (280, 360),
}

KEY_INTERACTIONS = {
    pygame.K_f: "feed",
    pygame.K_l: "letter",
    pygame.K_m: "music",
    pygame.K_g: "greet",
}


class Renderer:
    def __init__(self, engine: SimulationEngine) -> None:
        pygame.init()
        self.window = pygame.display.set_mode(
            (SCREEN_WIDTH * WINDOW_SCALE, (SCREEN_HEIGHT + HUD_HEIGHT) * WINDOW_SCALE))
        pygame.display.set_caption("Dollhouse — Little Computer Person")

        self.engine = engine
        self.clock = pygame.time.Clock()
        self.canvas = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT + HUD_HEIGHT))

        self.font_body = pygame.font.SysFont("Courier", 14, bold=True)
        self.font_small = pygame.font.SysFont("Courier", 11)

    def run(self) -> None:
        running = True
        while running:
            dt = self.clock.tick(FPS) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in KEY_INTERACTIONS:
                        self.engine.interact(KEY_INTERACTIONS[event.key])

            self.engine.update(dt)

            self._draw_frame()
            pygame.transform.scale(self.canvas, self.window.get_size(), self.window)
            pygame.display.flip()

        self.engine.shutdown()
        pygame.quit()

    def _draw_frame(self) -> None:
        self.canvas.fill(COLORS["sky"])
        self._render_house()
        self._render_furniture()
        self._render_person()
        self._render_dog()
        self._render_lighting()
        self._draw_hud()

    # ================================================================
    # HOUSE
    # ================================================================

    def _render_house(self) -> None:
        # Roof
        pygame.draw.polygon(self.canvas, COLORS["roof"],
                            [(20, 70), (SCREEN_WIDTH // 2, 20), (SCREEN_WIDTH - 20, 70)])

        for floor, (top, bottom) in FLOOR_BANDS.items():
            pygame.draw.rect(self.canvas, COLORS[f"wall_{floor}"],
                             (30, top, SCREEN_WIDTH - 60, bottom - top))
            pygame.draw.rect(self.canvas, COLORS["floor_board"],
                             (30, bottom, SCREEN_WIDTH - 60, 6))

        # Stairwells connect the floor bands
        for top_y, bottom_y in ((140, 170), (250, 280)):
            self._draw_flight(310, top_y - 10, bottom_y + 10)

    def _draw_flight(self, x: int, top: int, bottom: int) -> None:
        steps = 5
        h = (bottom - top) / steps
        for i in range(steps):
            y = int(bottom - (i + 1) * h)
            pygame.draw.rect(self.canvas, COLORS["stairs"],
                             (x - i * 3, y, 20 + i * 6, int(h) + 1))

    def _render_furniture(self) -> None:
        for name, loc in self.engine.ctx.locations.items():
            x, y = int(loc.x), int(loc.y)
            if loc.kind == PET:
                if name == "water_bowl":
                    pygame.draw.ellipse(self.canvas, COLORS["water"], (x - 8, y + 4, 16, 6))
                else:
                    pygame.draw.ellipse(self.canvas, COLORS["furniture"], (x - 16, y + 2, 32, 10))
                continue
            if loc.kind != ROOM or name.endswith("_center"):
                continue

            if name == "bed":
                pygame.draw.rect(self.canvas, COLORS["furniture"], (x - 30, y + 4, 60, 16))
                pygame.draw.rect(self.canvas, COLORS["hud_text"], (x - 28, y, 14, 6))
            elif name == "tv":
                pygame.draw.rect(self.canvas, COLORS["furniture"], (x - 16, y - 4, 32, 24))
                pygame.draw.rect(self.canvas, COLORS["tv_screen"], (x - 13, y - 1, 26, 16))
            elif name == "fridge":
                pygame.draw.rect(self.canvas, COLORS["hud_text"], (x - 12, y - 30, 24, 50))
            else:
                pygame.draw.rect(self.canvas, COLORS["furniture"], (x - 14, y + 2, 28, 18))

    # ================================================================
    # CHARACTERS
    # ================================================================

    def _render_person(self) -> None:
        agent = self.engine.ctx.agent
        x, y = int(agent.x), int(agent.y)

        if agent.is_sleeping:
            pygame.draw.rect(self.canvas, COLORS["shirt"], (x - 20, y + 2, 34, 8))
            pygame.draw.circle(self.canvas, COLORS["skin"], (x - 24, y + 4), 5)
            return

        swing = 0
        if agent.is_walking:
            swing = 3 if (agent.walk_frame // 8) % 2 else -3

        pygame.draw.line(self.canvas, COLORS["trousers"], (x, y + 6), (x - swing, y + 20), 3)
        pygame.draw.line(self.canvas, COLORS["trousers"], (x, y + 6), (x + swing, y + 20), 3)
        pygame.draw.rect(self.canvas, COLORS["shirt"], (x - 5, y - 12, 10, 18))
        pygame.draw.circle(self.canvas, COLORS["skin"], (x, y - 18), 6)
        # Eye on the facing side
        pygame.draw.circle(self.canvas, COLORS["hud_bg"], (x + 3 * agent.direction, y - 19), 1)

    def _render_dog(self) -> None:
        dog = self.engine.ctx.companion
        x, y = int(dog.x), int(dog.y)
        facing = dog.direction

        if dog.behavior is CompanionBehavior.RESTING:
            pygame.draw.ellipse(self.canvas, COLORS["dog"], (x - 8, y + 4, 16, 8))
            return

        pygame.draw.ellipse(self.canvas, COLORS["dog"], (x - 8, y, 16, 9))
        pygame.draw.circle(self.canvas, COLORS["dog"], (x + 8 * facing, y - 1), 4)
        pygame.draw.circle(self.canvas, COLORS["dog_dark"], (x + 10 * facing, y - 4), 2)
        for leg in (-5, 4):
            pygame.draw.line(self.canvas, COLORS["dog_dark"], (x + leg, y + 8), (x + leg, y + 13), 2)

        tail_x = x - 8 * facing
        tail_y = y + 2 + int(dog.tail_wag)
        pygame.draw.line(self.canvas, COLORS["dog_dark"], (tail_x, y + 3),
                         (tail_x - 5 * facing, tail_y - 4), 2)

    # ================================================================
    # LIGHTING
    # ================================================================

    def _render_lighting(self) -> None:
        daylight = self.engine.ctx.clock.daylight()
        darkness = int(160 * (1.0 - daylight))
        if darkness <= 0:
            return
        overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        overlay.fill((*COLORS["night"], darkness))
        self.canvas.blit(overlay, (0, 0))

    @staticmethod
    def _lerp_color(c1: Color, c2: Color, t: float) -> Color:
        t = max(0.0, min(1.0, t))
        return (
            int(c1[0] + (c2[0] - c1[0]) * t),
            int(c1[1] + (c2[1] - c1[1]) * t),
            int(c1[2] + (c2[2] - c1[2]) * t),
        )

    # ================================================================
    # HUD
    # ================================================================

    def _draw_hud(self) -> None:
        top = SCREEN_HEIGHT
        pygame.draw.rect(self.canvas, COLORS["hud_bg"], (0, top, SCREEN_WIDTH, HUD_HEIGHT))

        status = self.engine.get_status()
        info = self.engine.get_time_info()
        dog = self.engine.ctx.companion

        self._text(f"{info['time']}  DAY {info['day']}", 12, top + 8)
        self._text(f"MOOD: {status['mood'].upper()}", 220, top + 8)
        self._text(f"DOING: {status['activity'].upper()}", 420, top + 8)

        self._bar("HUNGER", status["hunger"], 12, top + 32)
        self._bar("ENERGY", status["energy"], 220, top + 32)
        self._text(f"{dog.name.upper()}: {dog.emotional.upper()}", 420, top + 32, small=True)

        self._text(status["message"], 12, top + 56)
        self._text("F FEED  L LETTER  M MUSIC  G GREET  ESC QUIT",
                   12, top + HUD_HEIGHT - 16, small=True, dim=True)

    def _bar(self, label: str, value: float, x: int, y: int) -> None:
        width = 100
        self._text(label, x, y, small=True)
        bx = x + 60
        pygame.draw.rect(self.canvas, COLORS["bar_bg"], (bx, y + 2, width, 8))
        color = self._lerp_color(COLORS["bar_low"], COLORS["bar_good"], value / 100.0)
        pygame.draw.rect(self.canvas, color, (bx, y + 2, int(math.ceil(width * value / 100.0)), 8))

    def _text(self, text: str, x: int, y: int, small: bool = False, dim: bool = False) -> None:
        font = self.font_small if small else self.font_body
        color = COLORS["hud_dim"] if dim else COLORS["hud_text"]
        self.canvas.blit(font.render(text, True, color), (x, y))
