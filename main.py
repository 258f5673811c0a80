# Ponto de entrada do jogo
# Mantemos esse arquivo mínimo para separar a janela (stacker/app.py) da simulação (stacker/game.py).

from stacker.app import StackerApp

if __name__ == "__main__":
    # Importar StackerApp não abre janela; só run() entra no loop principal.
    app = StackerApp()
    app.run()
