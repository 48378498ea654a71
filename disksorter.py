import logging
import sys

import pygame

from disks import ALGORITHMS, DiskColor, DiskState, get_generator

logger = logging.getLogger(__name__)

# ============================================================
# ===================== USER SETTINGS ========================
# ============================================================

WINDOW_WIDTH   = 1100
WINDOW_HEIGHT  = 680
FPS            = 30

MIN_LIGHT_COUNT     = 1
MAX_LIGHT_COUNT     = 40
DEFAULT_LIGHT_COUNT = 8

BACKGROUND_COLOR = (5, 5, 10)
ACTIVE_COLOR     = (255, 60, 60)
LIGHT_DISK_COLOR = (235, 228, 205)
DARK_DISK_COLOR  = (60, 60, 82)
DISK_SPACING     = 4
ACTIVE_OUTLINE   = 3

# Pause on the finished row before returning to the menu (ms).
FINISH_WAIT = 1800

# ============================================================
# ========================= UI THEME =========================
# ============================================================

UI_TEXT    = (215, 215, 228)
UI_SUBTEXT = (105, 105, 130)
UI_ACCENT  = (255, 55, 55)
UI_GREEN   = (60, 200, 100)

# ============================================================
# ======================= COLOR / DRAW =======================
# ============================================================

def disk_to_color(color):
    return LIGHT_DISK_COLOR if color == DiskColor.LIGHT else DARK_DISK_COLOR


def disk_center(i, total, width=WINDOW_WIDTH, height=WINDOW_HEIGHT):
    dw = width / total
    return int(i * dw + dw / 2), height // 2


def disk_radius(total, width=WINDOW_WIDTH):
    return max(2, int(width / total / 2) - DISK_SPACING)


def draw_disks(screen, row, active_indices, label="", flip=True):
    screen.fill(BACKGROUND_COLOR)
    w, h = screen.get_size()
    n = row.total_count()
    r = disk_radius(n, w)
    for i in range(n):
        center = disk_center(i, n, w, h)
        pygame.draw.circle(screen, disk_to_color(row.get(i)), center, r)
        if i in active_indices:
            pygame.draw.circle(screen, ACTIVE_COLOR, center, r + ACTIVE_OUTLINE, ACTIVE_OUTLINE)
    if label:
        f = pygame.font.SysFont("consolas", 18)
        screen.blit(f.render(label, True, (140, 140, 160)), (12, 10))
    if flip:
        pygame.display.flip()


def status_label(name, row, swaps):
    return f"{name}  |  {row.total_count()} disks  |  swaps: {swaps}"

# ============================================================
# ========================= RUN LOOP =========================
# ============================================================

def run_sort(screen, cfg):
    row = DiskState(cfg["light_count"])
    gen = get_generator(cfg["key"], row)
    clock = pygame.time.Clock(); name = cfg["name"]; swaps = 0
    logger.info("Running %s on %d disks", name, row.total_count())

    draw_disks(screen, row, [], status_label(name, row, swaps))
    while True:
        clock.tick(FPS)
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT: pygame.quit(); sys.exit()
            if ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE: return swaps
        try:
            state, active = next(gen)
            swaps += 1
            draw_disks(screen, state, active, status_label(name, state, swaps))
        except StopIteration:
            logger.info("%s finished: %d swaps, sorted=%s", name, swaps, row.is_sorted())
            draw_disks(screen, row, [], status_label(name, row, swaps) + "  [SORTED]")
            pygame.time.wait(FINISH_WAIT); return swaps

# ============================================================
# =========================== MENU ===========================
# ============================================================

class Menu:
    """Left/Right picks the algorithm, Up/Down the light count, Enter starts."""

    def __init__(self, screen):
        self.screen      = screen
        self.sel         = 0
        self.light_count = DEFAULT_LIGHT_COUNT

    def handle(self, ev):
        if ev.type != pygame.KEYDOWN:
            return None
        if ev.key == pygame.K_LEFT:
            self.sel = (self.sel - 1) % len(ALGORITHMS)
        elif ev.key == pygame.K_RIGHT:
            self.sel = (self.sel + 1) % len(ALGORITHMS)
        elif ev.key == pygame.K_UP:
            self.light_count = min(MAX_LIGHT_COUNT, self.light_count + 1)
        elif ev.key == pygame.K_DOWN:
            self.light_count = max(MIN_LIGHT_COUNT, self.light_count - 1)
        elif ev.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
            return "start"
        return None

    def draw(self):
        preview = DiskState(self.light_count)
        draw_disks(self.screen, preview, [], flip=False)
        f_big = pygame.font.SysFont("consolas", 26)
        f_sm  = pygame.font.SysFont("consolas", 16)
        nm, _ = ALGORITHMS[self.sel]
        self.screen.blit(f_big.render("DISK SORTER", True, UI_ACCENT), (16, 16))
        self.screen.blit(f_big.render(f"< {nm} >", True, UI_TEXT), (16, 60))
        self.screen.blit(f_sm.render(f"light disks: {self.light_count}", True, UI_GREEN), (16, 100))
        self.screen.blit(f_sm.render("LEFT/RIGHT algorithm   UP/DOWN size   ENTER start   ESC quit",
                                     True, UI_SUBTEXT), (16, self.screen.get_height() - 32))
        pygame.display.flip()

    def config(self):
        nm, ky = ALGORITHMS[self.sel]
        return dict(name=nm, key=ky, light_count=self.light_count)

# ============================================================
# ========================= MAIN =============================
# ============================================================

def main():
    logging.basicConfig(level=logging.INFO)
    pygame.init()
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption("DiskSorter")
    clock = pygame.time.Clock()

    while True:
        menu = Menu(screen)
        while True:
            clock.tick(60)
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT: pygame.quit(); sys.exit()
                if ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE:
                    pygame.quit(); sys.exit()
                if menu.handle(ev) == "start":
                    run_sort(screen, menu.config()); break
            else:
                menu.draw(); continue
            break

if __name__ == "__main__":
    main()
