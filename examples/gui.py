# examples/gui.py
from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox

import random

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.patches import Circle

from cg2d.links import unique_links
from cg2d.sweep import SweepDelaunay


def generate_random_points(n: int, size: int = 100):
    """n випадкових цілих точок у квадраті [0, size]^2."""
    return [(random.randint(0, size), random.randint(0, size)) for _ in range(n)]


def parse_points_from_text(text: str):
    """
    Парсить точки з багаторядкового тексту.
    Кожен рядок: x y або x, y (цілі).
    """
    points = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue  # пропускаємо пусті строки і коментарі
        parts = line.replace(",", " ").split()
        if len(parts) != 2:
            raise ValueError(f"Рядок {lineno}: очікується 2 числа, отримано: {len(parts)}")
        try:
            x, y = map(int, parts)
        except ValueError:
            raise ValueError(f"Рядок {lineno}: не вдалось прочитати цілі числа '{line}'")
        points.append((x, y))
    return points


class SweepApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Sweep Delaunay")
        self.geometry("800x700")

        self.fig = None
        self.ax = None
        self.canvas = None

        self._build_widgets()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Режим вводу ---
        mode_frame = ttk.LabelFrame(main, text="Режим вводу точок")
        mode_frame.pack(fill="x", pady=5)

        self.input_mode = tk.StringVar(value="random")
        ttk.Radiobutton(mode_frame, text="Випадкові точки", variable=self.input_mode,
                        value="random", command=self._update_mode_state
                        ).grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Radiobutton(mode_frame, text="Ручне введення точок", variable=self.input_mode,
                        value="manual", command=self._update_mode_state
                        ).grid(row=0, column=1, sticky="w", padx=5, pady=2)

        ttk.Label(mode_frame, text="Кількість:").grid(row=1, column=0, sticky="w", padx=5, pady=5)
        self.n_entry = ttk.Entry(mode_frame, width=10)
        self.n_entry.insert(0, "30")
        self.n_entry.grid(row=1, column=1, sticky="w", padx=5, pady=5)

        self.show_circles = tk.BooleanVar(value=False)
        ttk.Checkbutton(mode_frame, text="Описані кола", variable=self.show_circles
                        ).grid(row=1, column=2, sticky="w", padx=5, pady=5)

        # --- Поле для ручного вводу ---
        manual_frame = ttk.LabelFrame(main, text="Ручне введення (одна точка - один рядок)")
        manual_frame.pack(fill="x", pady=5)
        self.points_text = tk.Text(manual_frame, height=5, wrap="none")
        self.points_text.pack(fill="both", expand=True, padx=5, pady=5)
        self.points_text.insert("1.0", "3 0\n5 5\n0 2\n-1 -4\n1 4\n")

        ttk.Button(main, text="Тріангулювати", command=self.run_pipeline).pack(fill="x", pady=10)

        # --- Результати ---
        result_frame = ttk.LabelFrame(main, text="Результати")
        result_frame.pack(fill="x", pady=5)
        self.tris_var = tk.StringVar(value="-")
        self.valid_var = tk.StringVar(value="-")
        ttk.Label(result_frame, text="Трикутників:").grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.tris_var).grid(row=0, column=1, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, text="Валідація:").grid(row=1, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.valid_var).grid(row=1, column=1, sticky="w", padx=5, pady=2)

        plot_frame = ttk.LabelFrame(main, text="Візуалізація")
        plot_frame.pack(fill="both", expand=True, pady=5)
        self.fig = Figure(figsize=(4, 3))
        self.ax = self.fig.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

        self._update_mode_state()

    def _update_mode_state(self):
        state = "normal" if self.input_mode.get() == "random" else "disabled"
        self.n_entry.configure(state=state)

    def update_plot(self, points, triangles):
        self.ax.clear()
        if points:
            self.ax.plot([p[0] for p in points], [p[1] for p in points], "k.", markersize=4)
        if not triangles:
            self.ax.set_title("Немає трикутників")
            self.canvas.draw()
            return

        for a, b in unique_links(triangles):
            self.ax.plot([a.x, b.x], [a.y, b.y], color="tab:red", linewidth=0.8)
        if self.show_circles.get():
            for t in triangles:
                self.ax.add_patch(Circle((t.xc, t.yc), t.r ** 0.5, fill=False,
                                         linewidth=0.3, color="tab:blue"))
        self.ax.set_aspect("equal", adjustable="datalim")
        self.ax.set_title("Delaunay (sweep)")
        self.canvas.draw()

    def run_pipeline(self):
        if self.input_mode.get() == "random":
            try:
                n = int(self.n_entry.get())
                if n < 0:
                    raise ValueError
            except ValueError:
                messagebox.showerror("Помилка", "Кількість точок має бути невід’ємним цілим числом.")
                return
            points = generate_random_points(n)
        else:
            try:
                points = parse_points_from_text(self.points_text.get("1.0", "end"))
            except ValueError as e:
                messagebox.showerror("Помилка парсингу точок", str(e))
                return

        d = SweepDelaunay(points)
        triangles = d.build()
        report = d.validate()
        self.update_plot(points, triangles)

        self.tris_var.set(str(len(triangles)))
        if len(points) < 3:
            self.valid_var.set("Замало точок (потрібно щонайменше 3)")
        elif report["bad_delaunay"] or report["super_refs"] or report["repeated_vertices"] or report["bad_edges"]:
            self.valid_var.set("Є проблеми (див. консоль)")
        else:
            self.valid_var.set("OK")
        print("VALIDATION:", report)


if __name__ == "__main__":
    app = SweepApp()
    app.mainloop()
