# stacker/grid.py
# Geometria da grade e mapa esparso das células congeladas.
# - Grid: dimensões fixas (colunas x linhas) e tamanho de cada célula em px.
# - FrozenGrid: mapeia (col, row) -> quadrado (x, y, w, h) já colocado.
#
# Coordenadas contínuas (x, y) viram chave inteira dividindo por GRID_SIZE
# e truncando (mesma regra do int() do Python para valores positivos).

from dataclasses import dataclass

# ---------- CONFIGURAÇÃO PADRÃO ----------
GRID_SIZE = 40.0   # lado de cada célula (px)
WIDTH = 7          # número de colunas
HEIGHT = 15        # número de linhas
# -----------------------------------------


class ConfigError(ValueError):
    """Configuração inválida (dimensões, velocidade, tamanho de bloco...)."""


@dataclass(frozen=True)
class Grid:
    """Espaço de coordenadas imutável de width x height células."""
    width: int = WIDTH
    height: int = HEIGHT
    grid_size: float = GRID_SIZE

    def __post_init__(self):
        if int(self.width) != self.width or self.width <= 0:
            raise ConfigError(f"largura da grade inválida: {self.width!r}")
        if int(self.height) != self.height or self.height <= 0:
            raise ConfigError(f"altura da grade inválida: {self.height!r}")
        if self.grid_size <= 0:
            raise ConfigError(f"tamanho da célula inválido: {self.grid_size!r}")
        # normaliza os tipos (frozen: só via object.__setattr__)
        object.__setattr__(self, "width", int(self.width))
        object.__setattr__(self, "height", int(self.height))
        object.__setattr__(self, "grid_size", float(self.grid_size))

    @property
    def pixel_width(self):
        return self.width * self.grid_size

    @property
    def pixel_height(self):
        return self.height * self.grid_size

    @property
    def bottom_y(self):
        # y da última linha (a primeira a ser preenchida)
        return self.pixel_height - self.grid_size

    def cell_of(self, x, y):
        """Converte posição contínua em chave inteira (col, row)."""
        return int(x / self.grid_size), int(y / self.grid_size)

    def square_at(self, x, y):
        return (x, y, self.grid_size, self.grid_size)

    def check_block_size(self, size):
        if int(size) != size or size <= 0:
            raise ConfigError(f"tamanho de bloco inválido: {size!r}")
        if size > self.width:
            raise ConfigError(f"bloco de {size} quadrados não cabe em {self.width} colunas")


class FrozenGrid:
    """Células já colocadas, indexadas por (col, row). Só cresce."""

    def __init__(self, grid):
        self.grid = grid
        self._cells = {}

    def __len__(self):
        return len(self._cells)

    def __contains__(self, key):
        return key in self._cells

    def __iter__(self):
        return iter(self._cells)

    def get(self, key, default=None):
        return self._cells.get(key, default)

    def freeze(self, squares):
        """Congela os quadrados e devolve as chaves usadas, na mesma ordem."""
        keys = []
        for square in squares:
            key = self.grid.cell_of(square[0], square[1])
            self._cells[key] = tuple(square)
            keys.append(key)
        return keys

    def squares(self):
        return tuple(self._cells.values())

    def clear(self):
        self._cells.clear()
