import logging
import tkinter as tk
from tkinter import ttk, messagebox

from .errors import GameStateError, InvalidMoveError
from .settings import GRID_SIZE, ROW_LABELS
from .ship import CellState

logger = logging.getLogger(__name__)

# Cell dimensions and colors
CELL_SIZE = 40
MARGIN = 24  # room for row/column labels
WATER_COLOR = '#1E90FF'
SHIP_COLOR = '#808080'
HIT_COLOR = '#FF4C4C'
MISS_COLOR = '#4C72B0'
BG_COLOR = '#2B3A42'


def cell_from_point(x, y, cell_size=CELL_SIZE, margin=MARGIN):
    """Map a canvas click to (row, col), or None when it falls outside the grid."""
    if x < margin or y < margin:
        return None
    r = int((y - margin) // cell_size)
    c = int((x - margin) // cell_size)
    if r >= GRID_SIZE or c >= GRID_SIZE:
        return None
    return r, c


class BattleshipUI:
    def __init__(self, root, model):
        self.root = root
        self.model = model
        self.root.title("Battleship")
        self.root.configure(bg=BG_COLOR)
        self.root.resizable(False, False)

        self.build_menu()
        self.build_frames()
        self.build_board()
        self.build_status_bar()
        self.new_game()

    def build_menu(self):
        menu = tk.Menu(self.root)
        self.root.config(menu=menu)
        game_menu = tk.Menu(menu, tearoff=0)
        menu.add_cascade(label="Game", menu=game_menu)
        game_menu.add_command(label="New Game", command=self.new_game)
        game_menu.add_separator()
        game_menu.add_command(label="Exit", command=self.root.destroy)

    def build_frames(self):
        style = ttk.Style()
        try:
            style.theme_use("clam")
        except tk.TclError:
            pass
        style.configure("Status.TLabel", background=BG_COLOR, foreground='white', font=('Arial', 14))
        self.top_frame = ttk.Frame(self.root)
        self.top_frame.pack(fill='x', pady=(10, 0))
        self.main_frame = ttk.Frame(self.root)
        self.main_frame.pack(padx=20, pady=10)
        self.bottom_frame = ttk.Frame(self.root)
        self.bottom_frame.pack(fill='x', pady=(0, 10))

    def build_board(self):
        self.stats = tk.StringVar()
        ttk.Label(self.top_frame, textvariable=self.stats, style="Status.TLabel",
                  anchor='center').pack(fill='x')

        size = MARGIN + GRID_SIZE * CELL_SIZE
        self.canvas = tk.Canvas(self.main_frame, width=size, height=size,
                                bg='#1E2A38', highlightthickness=0)
        self.canvas.pack()
        self.canvas.bind('<Button-1>', self.on_click)

        for i in range(GRID_SIZE):
            self.canvas.create_text(MARGIN + i * CELL_SIZE + CELL_SIZE / 2, MARGIN / 2,
                                    text=str(i), fill='white', font=('Arial', 10))
            self.canvas.create_text(MARGIN / 2, MARGIN + i * CELL_SIZE + CELL_SIZE / 2,
                                    text=ROW_LABELS[i], fill='white', font=('Arial', 10))

    def build_status_bar(self):
        self.status = tk.StringVar()
        ttk.Label(self.bottom_frame, textvariable=self.status, style="Status.TLabel").pack(fill='x')

    # ------------------------------------------------------------------ #
    # Drawing
    # ------------------------------------------------------------------ #
    def draw_board(self, ship_grid=None):
        self.canvas.delete('cell')
        cells = self.model.get_cell_grid()
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                x = MARGIN + c * CELL_SIZE
                y = MARGIN + r * CELL_SIZE
                self.canvas.create_rectangle(x, y, x + CELL_SIZE, y + CELL_SIZE,
                                             fill=WATER_COLOR, outline='black', tags='cell')
                state = cells[r][c]
                if state == CellState.HIT:
                    color = HIT_COLOR
                elif state == CellState.MISS:
                    color = MISS_COLOR
                elif ship_grid is not None and ship_grid[r][c] is not None:
                    color = SHIP_COLOR
                else:
                    continue
                self.canvas.create_rectangle(x + 5, y + 5, x + CELL_SIZE - 5, y + CELL_SIZE - 5,
                                             fill=color, outline='', tags='cell')
        self.stats.set(f"Guesses: {self.model.get_guess_count()} / {self.model.get_max_guesses()}")

    def update_status(self, text):
        self.status.set(text)

    # ------------------------------------------------------------------ #
    # Events
    # ------------------------------------------------------------------ #
    def new_game(self):
        self.model.start()
        self.draw_board()
        self.update_status("Welcome to Battleship! Click a cell to make your guess.")

    def on_click(self, event):
        coord = cell_from_point(event.x, event.y)
        if coord is None or self.model.is_game_over():
            return
        self.fire(*coord)

    def fire(self, r, c):
        sunk_before = set(self.model.get_sunk_ships())
        try:
            hit = self.model.guess(r, c)
        except InvalidMoveError as e:
            self.update_status(f"Error: {e}")
            return
        except GameStateError:
            self.update_status("Error: Game is already over")
            return

        self.draw_board()
        newly_sunk = [k for k in self.model.get_sunk_ships() if k not in sunk_before]
        if newly_sunk:
            self.update_status(f"Hit! You sank the {newly_sunk[0].label}!")
        elif hit:
            self.update_status("Hit! You hit a ship!")
        else:
            self.update_status("Miss! Try again.")

        if self.model.is_game_over():
            self.root.after(1000, self.finish)

    def finish(self):
        # A new game may have started while this callback was pending
        if not self.model.is_game_over():
            return
        win = self.model.are_all_ships_sunk()
        self.draw_board(ship_grid=self.model.get_ship_grid())
        if win:
            self.update_status("You Win! All ships destroyed!")
        else:
            self.update_status("Game Over! Out of guesses.")

        again = messagebox.askyesno(
            "Game Finished",
            "Congratulations! Play again?" if win else "Game over. Play again?",
        )
        if again:
            self.new_game()
        else:
            self.root.destroy()


def run(model):
    root = tk.Tk()
    BattleshipUI(root, model)
    logger.info("Starting tkinter front end")
    root.mainloop()
