# stacker/game.py
# Máquina de estados da simulação do Stacker.
# - tick(dt): se não há bloco ativo, spawna um; depois move e checa as paredes.
# - on_key_press(key): a tecla de colocar congela o bloco e sobe um nível.
# - snapshot_for_render(): leitura pura para o desenho (não altera estado).
#
# Não importa pygame: o app (stacker/app.py) traduz eventos em chamadas aqui.

import random

from stacker.block import ActiveBlock
from stacker.grid import ConfigError, FrozenGrid, Grid

# ---------- PARÂMETROS DE TUNING ----------
INITIAL_SPEED = 1.5     # células por segundo no nível 1
SPEED_GROWTH = 1.35     # multiplicador aplicado a cada bloco colocado
PLACE_KEY = "place"     # ação lógica de colocar o bloco
SPAWN_POLICY = "random"  # "random" (posição sorteada) ou "center"
SPAWN_POLICIES = ("random", "center")
# -----------------------------------------


def block_size_for_level(level):
    """Níveis 1-3 usam 3 quadrados, 4-6 usam 2 e do 7 em diante só 1."""
    if level <= 3:
        return 3
    if level <= 6:
        return 2
    return 1


class Game:
    def __init__(self, grid=None, speed=INITIAL_SPEED, speed_growth=SPEED_GROWTH,
                 place_key=PLACE_KEY, spawn_policy=SPAWN_POLICY, rng=None):
        self.grid = grid if grid is not None else Grid()
        if speed <= 0:
            raise ConfigError(f"velocidade inicial deve ser positiva: {speed!r}")
        if speed_growth <= 1:
            raise ConfigError(f"crescimento de velocidade deve ser > 1: {speed_growth!r}")
        if spawn_policy not in SPAWN_POLICIES:
            raise ConfigError(f"política de spawn desconhecida: {spawn_policy!r}")
        # o maior bloco (nível 1) precisa caber na grade
        self.grid.check_block_size(block_size_for_level(1))

        self.initial_speed = float(speed)
        self.speed_growth = float(speed_growth)
        self.place_key = place_key
        self.spawn_policy = spawn_policy
        self.rng = rng if rng is not None else random.Random()

        self.active = ActiveBlock(self.grid)
        self.frozen = FrozenGrid(self.grid)
        self.reset()

    def reset(self):
        self.active.drain()
        self.frozen.clear()
        self.speed = self.initial_speed
        self.direction = 1
        self.level = 1
        self.current_y = self.grid.bottom_y

    # ----------------- operações -----------------
    def spawn(self, size):
        self.grid.check_block_size(size)
        assert not self.active, "spawn com bloco ativo"
        gs = self.grid.grid_size
        if self.spawn_policy == "center":
            x = self.grid.pixel_width / 2 - size * gs / 2
        else:
            # sorteado para impedir que spam da tecla empilhe sempre no mesmo lugar
            max_x = self.grid.pixel_width - size * gs
            x = self.rng.random() * max_x if max_x > 0 else 0.0
        self.active.fill(x, self.current_y, size)

    def advance(self, dt):
        if dt < 0:
            raise ValueError(f"dt negativo: {dt!r}")
        self.active.move(self.speed * dt * self.direction * self.grid.grid_size)

    def check_bounds(self):
        # sem correção do excesso: inverte a cada frame enquanto estiver fora
        if self.active.touches_wall():
            self.direction *= -1
            return True
        return False

    def place(self):
        """Congela o bloco ativo, sobe uma linha, spawna o próximo e acelera."""
        keys = self.frozen.freeze(self.active.drain())
        self.level += 1
        self.current_y -= self.grid.grid_size
        if self.current_y < 0:
            self.current_y = self.grid.bottom_y
        self.spawn(self.block_size)
        self.speed *= self.speed_growth
        return keys

    def tick(self, dt):
        if not self.active:
            self.spawn(self.block_size)
        self.advance(dt)
        self.check_bounds()

    # ----------------- interface do host -----------------
    def on_tick(self, dt):
        self.tick(dt)

    def on_key_press(self, key):
        if key == self.place_key:
            self.place()
            return True
        return False

    def snapshot_for_render(self):
        return self.active.snapshot(), self.frozen.squares()

    @property
    def block_size(self):
        return block_size_for_level(self.level)
