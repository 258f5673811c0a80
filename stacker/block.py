# stacker/block.py
# Bloco ativo: fila horizontal de quadrados contíguos que se move como corpo rígido.
# Cada quadrado é (x, y, w, h) em px; mantemos x em float para movimento suave.
#
# O bloco não sabe nada de pygame: quem desenha é o app (stacker/app.py).


class ActiveBlock:
    def __init__(self, grid):
        self.grid = grid
        self.squares = []

    def __len__(self):
        return len(self.squares)

    def __bool__(self):
        return bool(self.squares)

    def __iter__(self):
        return iter(self.squares)

    def fill(self, x, y, size):
        """Cria `size` quadrados lado a lado a partir de (x, y)."""
        gs = self.grid.grid_size
        for index in range(size):
            self.squares.append(list(self.grid.square_at(x + gs * index, y)))

    def move(self, dx):
        for square in self.squares:
            square[0] += dx

    def touches_wall(self):
        # basta um quadrado encostar (ou passar) na borda
        right = self.grid.pixel_width
        gs = self.grid.grid_size
        for square in self.squares:
            if square[0] <= 0 or square[0] + gs >= right:
                return True
        return False

    def drain(self):
        """Esvazia o bloco e devolve os quadrados como tuplas."""
        squares = [tuple(s) for s in self.squares]
        self.squares.clear()
        return squares

    def snapshot(self):
        return tuple(tuple(s) for s in self.squares)
