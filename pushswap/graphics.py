"""An animated window that steps through the recorded operations of a bench."""

from __future__ import annotations

from dataclasses import dataclass

from pushswap.bench import Bench

STEP_DELAY_MS = 10
WINDOW_SIZE = (1280, 720)

BACKGROUND = (200, 200, 200)
DIVIDER = (100, 100, 100)
BAR = (209, 118, 27)
BAR_OUTLINE = (200, 200, 200)


@dataclass(frozen=True)
class _Rect:
    x: int
    y: int
    w: int
    h: int


def _map_range(n: int, lo: int, hi: int, out_lo: int, out_hi: int) -> int:
    """Map ``n`` from ``[lo, hi]`` onto ``[out_lo, out_hi]``, truncating toward zero."""
    if hi == lo:
        return out_lo
    num = (n - lo) * (out_hi - out_lo)
    den = hi - lo
    quotient = abs(num) // abs(den)
    return out_lo + (quotient if (num >= 0) == (den > 0) else -quotient)


class Viewer:
    """Playback state for a bench: pause, speed, direction and single steps.

    Keys are given by name, as ``pygame.key.name`` reports them.
    """

    def __init__(self, bench: Bench) -> None:
        self.bench = bench
        self.running = True
        self.direction = 1
        self.refresh = True
        self.delay = 10
        self.paused = True
        self.step = 0
        values = list(bench.a) or [0]
        self.low = min(values)
        self.high = max(values)
        self._to_wait = 1

    def handle_key(self, key: str) -> None:
        """React to a pressed key; unknown keys are ignored."""
        if key in ("escape", "q"):
            self.running = False
        elif key == "space":
            self.paused = not self.paused
        elif key == "down":
            self.delay = max(0, self.delay - 1)
        elif key == "up":
            self.delay += 1
        elif key == "left":
            self.step -= 1
        elif key == "right":
            self.step += 1
        elif key == "r":
            self.direction *= -1

    def tick(self) -> bool:
        """Advance the playback by one frame; return True when a redraw is due."""
        if self._to_wait <= 0:
            self._to_wait = self.delay
            self.step = self.direction
        elif not self.paused:
            self._to_wait -= 1
        if self.step:
            self.refresh = True
        if self.step >= 1:
            if not self.bench.step_forward():
                self.paused = True
            self.step -= 1
        if self.step <= -1:
            if not self.bench.step_backward():
                self.paused = True
            self.step += 1
        redraw = self.refresh
        self.refresh = False
        return redraw

    def _bars(self, width: int, height: int) -> list[_Rect]:
        size = self.bench.a.capacity or max(1, len(self.bench.a) + len(self.bench.b))
        bar_height = height // size
        rects = []
        for items, offset in ((self.bench.a.items, 0), (self.bench.b.items, width // 2)):
            y = height
            for value in items:
                x = _map_range(value, self.low, self.high, width // 4, 0) + offset
                w = _map_range(value, self.low, self.high, 10, width // 2)
                y -= bar_height
                rects.append(_Rect(x, y, w, bar_height))
        return rects

    def _draw(self, pygame, screen) -> None:
        width, height = screen.get_size()
        screen.fill(BACKGROUND)
        pygame.draw.rect(screen, DIVIDER, pygame.Rect(width // 2, 0, 1, height))
        for bar in self._bars(width, height):
            rect = pygame.Rect(bar.x, bar.y, bar.w, bar.h)
            pygame.draw.rect(screen, BAR, rect)
            pygame.draw.rect(screen, BAR_OUTLINE, rect, 1)
        pygame.display.flip()

    def run(self) -> None:
        """Open a full-screen window and play until it is closed."""
        import pygame

        pygame.init()
        try:
            screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            self.refresh = True
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        self.handle_key(pygame.key.name(event.key))
                if self.tick():
                    self._draw(pygame, screen)
                if self.delay:
                    pygame.time.delay(STEP_DELAY_MS)
        finally:
            pygame.quit()