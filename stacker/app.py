# stacker/app.py
# Janela pygame do Stacker:
# - traduz eventos do pygame em chamadas do Game (on_tick / on_key_press)
# - desenha a grade, os quadrados congelados (verde) e o bloco ativo (vermelho)
# - ESC fecha, P pausa, R reinicia; SPACE coloca o bloco
#
import pygame

from stacker.background import GridBackground
from stacker.game import Game, PLACE_KEY

# ----------------- Configurações -----------------
FPS = 60
CAPTION = "Stacker Game"
FONT_NAME = "arial"

ACTIVE_COLOR = (255, 0, 0)
FROZEN_COLOR = (0, 255, 0)
HUD_COLOR = (60, 60, 60)
FALLBACK_BG_COLOR = (255, 255, 255)

# teclas físicas -> ações lógicas do Game
KEY_ACTIONS = {
    pygame.K_SPACE: PLACE_KEY,
}


class StackerApp:
    def __init__(self, game=None):
        pygame.init()

        self.game = game if game is not None else Game()
        grid = self.game.grid
        self.size = (int(grid.pixel_width), int(grid.pixel_height))

        # janela e clock
        self.screen = pygame.display.set_mode(self.size)
        pygame.display.set_caption(CAPTION)
        self.clock = pygame.time.Clock()
        self.running = True
        self.paused = False

        # fundo com a grade
        try:
            self.background = GridBackground(grid)
        except Exception as e:
            print(f"Aviso: falha ao criar GridBackground: {e}")
            self.background = None

        # fonte do HUD (opcional)
        try:
            self.font = pygame.font.SysFont(FONT_NAME, 16, bold=True)
        except Exception as e:
            print(f"Aviso: fonte indisponível, HUD desativado: {e}")
            self.font = None

    # ----------------- main loop -----------------
    def run(self):
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0
            self.step(dt)
        self.quit()

    def step(self, dt):
        """Um frame completo: eventos, atualização e desenho."""
        self.handle_events()
        if self.running and not self.paused:
            self.update(dt)
        if self.running:
            self.draw()

    # ----------------- events -----------------
    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self._handle_key(event.key)

    def _handle_key(self, key):
        if key == pygame.K_ESCAPE:
            self.running = False
            return
        if key == pygame.K_p:
            self.paused = not self.paused
            print("Pausado." if self.paused else "Continuando.")
            return
        if key == pygame.K_r:
            self.game.reset()
            self.paused = False
            print("Jogo reiniciado.")
            return
        if self.paused:
            return

        action = KEY_ACTIONS.get(key)
        if action is not None and self.game.on_key_press(action):
            print(f"Bloco colocado! Nível: {self.game.level} | velocidade: {self.game.speed:.3f}")

    # ----------------- update -----------------
    def update(self, dt):
        self.game.on_tick(dt)

    # ----------------- draw -----------------
    def draw(self, surface=None):
        surface = surface if surface is not None else self.screen

        if self.background:
            try:
                self.background.draw(surface)
            except Exception as e:
                print(f"Aviso: erro ao desenhar a grade: {e}")
                self.background = None
                surface.fill(FALLBACK_BG_COLOR)
        else:
            surface.fill(FALLBACK_BG_COLOR)

        active, frozen = self.game.snapshot_for_render()
        for square in active:
            pygame.draw.rect(surface, ACTIVE_COLOR, _to_rect(square))
        for square in frozen:
            pygame.draw.rect(surface, FROZEN_COLOR, _to_rect(square))

        if self.font:
            self._draw_hud(surface)
        if self.paused:
            self.draw_pause_overlay(surface)

        if surface is self.screen:
            pygame.display.set_caption(
                f"{CAPTION} | Nível {self.game.level} | FPS: {int(self.clock.get_fps())}")
            pygame.display.flip()

    def _draw_hud(self, surface):
        text = f"Nível {self.game.level}  x{self.game.speed:.2f}"
        surf = self.font.render(text, True, HUD_COLOR)
        surface.blit(surf, (6, 4))

    def draw_pause_overlay(self, surface):
        overlay = pygame.Surface(self.size, pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))
        surface.blit(overlay, (0, 0))
        if self.font:
            msg = self.font.render("PAUSADO", True, (255, 255, 255))
            surface.blit(msg, msg.get_rect(center=(self.size[0] // 2, self.size[1] // 2)))

    def quit(self):
        pygame.quit()


def _to_rect(square):
    x, y, w, h = square
    return pygame.Rect(int(x), int(y), int(w), int(h))


def main():
    app = StackerApp()
    app.run()
