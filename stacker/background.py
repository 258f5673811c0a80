# stacker/background.py
# Fundo da grade: preenchimento claro + linhas de cada coluna e linha.
# A grade não muda durante o jogo, então desenhamos uma vez numa surface
# própria e depois só fazemos blit a cada frame.
#
# Uso:
#   bg = GridBackground(grid)
#   no loop principal, antes dos blocos:
#       bg.draw(screen)
#
import pygame

BACKGROUND_COLOR = (255, 255, 255)
GRID_COLOR = (34, 34, 34)
GRID_LINE_WIDTH = 2


class GridBackground:
    def __init__(self, grid, color=BACKGROUND_COLOR, line_color=GRID_COLOR, line_width=GRID_LINE_WIDTH):
        """
        grid: stacker.grid.Grid com as dimensões (em células e px)
        color: cor de fundo
        line_color / line_width: aparência das linhas da grade
        """
        self.grid = grid
        self.color = color
        self.line_color = line_color
        self.line_width = line_width
        self.size = (int(grid.pixel_width), int(grid.pixel_height))
        self.surface = None

    def line_segments(self):
        """Segmentos ((x0, y0), (x1, y1)) das linhas verticais e horizontais."""
        gs = self.grid.grid_size
        w, h = self.size
        segments = []
        for col in range(self.grid.width):
            x = int(col * gs)
            segments.append(((x, 0), (x, h)))
        for row in range(self.grid.height):
            y = int(row * gs)
            segments.append(((0, y), (w, y)))
        return segments

    def _render(self):
        surf = pygame.Surface(self.size)
        surf.fill(self.color)
        for start, end in self.line_segments():
            pygame.draw.line(surf, self.line_color, start, end, self.line_width)
        return surf

    def draw(self, surface):
        if self.surface is None:
            self.surface = self._render()
        surface.blit(self.surface, (0, 0))
