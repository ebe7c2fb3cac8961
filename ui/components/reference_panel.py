import tkinter as tk
from tkinter import ttk, filedialog, messagebox
from pathlib import Path

from core.config import MIN_ROMAN_VALUE, MAX_ROMAN_VALUE
from core.exceptions import CalculatorError
from core.utils import open_file
from services.chart_service import SUBTRACTIVE_EXAMPLES, SYMBOL_TABLE, export_chart


class ReferencePanel(ttk.Frame):
    def __init__(self, parent, chart_start: int = 1, chart_end: int = 100, *args, **kwargs):
        super().__init__(parent, *args, **kwargs)
        self.start_var = tk.IntVar(value=chart_start)
        self.end_var = tk.IntVar(value=chart_end)
        self._setup_ui()

    def _setup_ui(self):
        tree_frame = ttk.Frame(self)
        tree_frame.pack(fill="both", expand=True, padx=10, pady=10)

        cols = ("Symbol", "Value")
        self.tree = ttk.Treeview(tree_frame, columns=cols, show='headings', height=13)
        for col in cols:
            self.tree.heading(col, text=col)
            self.tree.column(col, width=120)
        self.tree.pack(fill="both", expand=True)

        for symbol, value in SYMBOL_TABLE:
            self.tree.insert('', 'end', values=(symbol, value))
        for symbol, value in SUBTRACTIVE_EXAMPLES:
            self.tree.insert('', 'end', values=(symbol, value), tags=('subtractive',))
        self.tree.tag_configure('subtractive', foreground='gray60')

        # Chart export
        export_frame = ttk.LabelFrame(self, text="Export Chart", padding=10)
        export_frame.pack(fill="x", padx=10, pady=(0, 10))

        ttk.Label(export_frame, text="From:").grid(row=0, column=0, sticky="e")
        ttk.Spinbox(export_frame, from_=MIN_ROMAN_VALUE, to=MAX_ROMAN_VALUE,
                    textvariable=self.start_var, width=6).grid(row=0, column=1, padx=5)
        ttk.Label(export_frame, text="To:").grid(row=0, column=2, sticky="e")
        ttk.Spinbox(export_frame, from_=MIN_ROMAN_VALUE, to=MAX_ROMAN_VALUE,
                    textvariable=self.end_var, width=6).grid(row=0, column=3, padx=5)
        ttk.Button(export_frame, text="Export...", command=self.export).grid(row=0, column=4, padx=5)

    def export(self):
        try:
            start, end = self.start_var.get(), self.end_var.get()
        except tk.TclError:
            messagebox.showerror("Error", "Chart bounds must be whole numbers.")
            return

        p = filedialog.asksaveasfilename(
            defaultextension=".csv",
            filetypes=[("CSV", "*.csv"), ("Excel", "*.xlsx")]
        )
        if not p:
            return

        try:
            written = export_chart(Path(p), start, end)
        except CalculatorError as e:
            messagebox.showerror("Error", e.message)
            return
        except OSError as e:
            messagebox.showerror("Error", f"Failed to save chart:\n{e}")
            return

        if messagebox.askyesno("Exported", f"Saved:\n{written.name}\n\nOpen it now?"):
            open_file(written)
