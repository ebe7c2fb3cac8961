import tkinter as tk
from tkinter import ttk

from core.models import CalculatorState, Operation
from services.calculator_service import CalculatorService

INSTRUCTIONS = (
    "• Enter Roman numerals (e.g. XIV, MCMLIV)\n"
    "• Supported numbers: I-MMMCMXCIX (1-3999)\n"
    "• Basic symbols: I(1), V(5), X(10), L(50), C(100), D(500), M(1000)\n"
    "• Examples: IV=4, IX=9, XL=40, XC=90, CD=400, CM=900"
)


class CalculatorPanel(ttk.Frame):
    def __init__(self, parent, service: CalculatorService, *args, **kwargs):
        super().__init__(parent, *args, **kwargs)
        self.service = service
        self.form_state = CalculatorState()

        # Tk variables mirror the state object
        self.input1_var = tk.StringVar()
        self.input2_var = tk.StringVar()
        self.operation_var = tk.StringVar(value=self.form_state.operation.value)
        self.result_var = tk.StringVar()
        self.error_var = tk.StringVar()
        self._instructions_visible = False

        self._setup_ui()

    def _setup_ui(self):
        ttk.Label(self, text="Roman Numeral Calculator", style="Heading.TLabel").pack(anchor="w", padx=10, pady=(10, 0))
        ttk.Separator(self).pack(fill="x", padx=10, pady=5)

        form = ttk.Frame(self, padding=10)
        form.pack(fill="x")

        # First number
        ttk.Label(form, text="First number:").grid(row=0, column=0, sticky="e")
        self.input1_entry = ttk.Entry(form, textvariable=self.input1_var, width=30)
        self.input1_entry.grid(row=0, column=1, sticky="w", padx=5, pady=3)

        # Operation
        ttk.Label(form, text="Operation:").grid(row=1, column=0, sticky="e")
        op_frame = ttk.Frame(form)
        op_frame.grid(row=1, column=1, sticky="w", padx=5, pady=3)
        for op in Operation:
            ttk.Radiobutton(
                op_frame, text=f"{op.symbol} {op.label}", value=op.value,
                variable=self.operation_var, style="Toolbutton"
            ).pack(side="left", padx=2)

        # Second number
        ttk.Label(form, text="Second number:").grid(row=2, column=0, sticky="e")
        self.input2_entry = ttk.Entry(form, textvariable=self.input2_var, width=30)
        self.input2_entry.grid(row=2, column=1, sticky="w", padx=5, pady=3)

        btn_frame = ttk.Frame(self, padding=(10, 0))
        btn_frame.pack(fill="x")
        ttk.Button(btn_frame, text="Calculate", command=self.calculate).pack(side="left")
        ttk.Button(btn_frame, text="Clear", command=self.clear).pack(side="left", padx=5)

        # Result / error
        out_frame = ttk.Frame(self, padding=10)
        out_frame.pack(fill="x")
        ttk.Label(out_frame, text="Result:").grid(row=0, column=0, sticky="w")
        ttk.Label(out_frame, textvariable=self.result_var, style="Result.TLabel").grid(row=0, column=1, sticky="w", padx=5)
        ttk.Label(out_frame, textvariable=self.error_var, style="Error.TLabel").grid(row=1, column=0, columnspan=2, sticky="w")

        ttk.Separator(self).pack(fill="x", padx=10, pady=5)

        # Collapsible instructions
        self.toggle_btn = ttk.Button(self, text="▸ Instructions", command=self._toggle_instructions)
        self.toggle_btn.pack(anchor="w", padx=10)
        self.instructions = ttk.Label(self, text=INSTRUCTIONS, justify="left")

        for entry in (self.input1_entry, self.input2_entry):
            entry.bind("<Return>", lambda e: self.calculate())

    def _toggle_instructions(self):
        if self._instructions_visible:
            self.instructions.pack_forget()
            self.toggle_btn.config(text="▸ Instructions")
        else:
            self.instructions.pack(anchor="w", padx=20, pady=5)
            self.toggle_btn.config(text="▾ Instructions")
        self._instructions_visible = not self._instructions_visible

    def calculate(self):
        self.form_state.input1 = self.input1_var.get()
        self.form_state.input2 = self.input2_var.get()
        self.form_state.operation = Operation(self.operation_var.get())

        outcome = self.service.calculate(self.form_state)

        self.result_var.set(self.form_state.result)
        self.error_var.set(self.form_state.error_message)
        return outcome

    def clear(self):
        self.form_state.clear()
        self.input1_var.set("")
        self.input2_var.set("")
        self.operation_var.set(self.form_state.operation.value)
        self.result_var.set("")
        self.error_var.set("")
        self.input1_entry.focus_set()
