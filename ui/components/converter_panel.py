import tkinter as tk
from tkinter import ttk

from core.exceptions import CalculatorError
from services.calculator_service import CalculatorService, describe_error


class ConverterPanel(ttk.Frame):
    """Two-way converter: type a numeral or a number, get the other."""

    def __init__(self, parent, service: CalculatorService, *args, **kwargs):
        super().__init__(parent, *args, **kwargs)
        self.service = service
        self.input_var = tk.StringVar()
        self.roman_var = tk.StringVar()
        self.arabic_var = tk.StringVar()
        self.error_var = tk.StringVar()
        self._setup_ui()

    def _setup_ui(self):
        frame = ttk.LabelFrame(self, text="Convert", padding=10)
        frame.pack(fill="x", padx=10, pady=10)

        ttk.Label(frame, text="Numeral or number:").grid(row=0, column=0, sticky="e")
        entry = ttk.Entry(frame, textvariable=self.input_var, width=25)
        entry.grid(row=0, column=1, padx=5, pady=3)
        entry.bind("<Return>", lambda e: self.convert())
        ttk.Button(frame, text="Convert", command=self.convert).grid(row=0, column=2)

        ttk.Label(frame, text="Roman:").grid(row=1, column=0, sticky="e")
        ttk.Label(frame, textvariable=self.roman_var, style="Result.TLabel").grid(row=1, column=1, sticky="w", padx=5)

        ttk.Label(frame, text="Arabic:").grid(row=2, column=0, sticky="e")
        ttk.Label(frame, textvariable=self.arabic_var, style="Result.TLabel").grid(row=2, column=1, sticky="w", padx=5)

        ttk.Label(frame, textvariable=self.error_var, style="Error.TLabel").grid(row=3, column=0, columnspan=3, sticky="w")

    def convert(self):
        self.error_var.set("")
        try:
            converted = self.service.convert(self.input_var.get())
        except CalculatorError as e:
            self.roman_var.set("")
            self.arabic_var.set("")
            self.error_var.set(describe_error(e))
            return

        self.roman_var.set(converted["roman"])
        self.arabic_var.set(str(converted["arabic"]))
