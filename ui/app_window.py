import tkinter as tk
from tkinter import ttk

from core.config import APP_TITLE
from core.logger import setup_logger
from services.calculator_service import CalculatorService
from ui.components.calculator_panel import CalculatorPanel
from ui.components.converter_panel import ConverterPanel
from ui.components.reference_panel import ReferencePanel
from ui.icon import create_icon
from ui.theme import apply_theme

logger = setup_logger(__name__)


class AppWindow:
    def __init__(self, root, config: dict):
        self.root = root
        self.config = config
        self.root.title(APP_TITLE)
        self.root.geometry(config["window_geometry"])
        self.root.minsize(*config["min_window_size"])

        # Keep a reference, Tk does not hold on to the image
        self.icon = create_icon(self.root)
        self.root.iconphoto(True, self.icon)

        apply_theme(self.root, config["theme"])

        self.service = CalculatorService(strict=config["strict_numerals"])
        if self.service.strict:
            logger.info("Strict numeral validation enabled")

        self._setup_ui()

    def _setup_ui(self):
        self.notebook = ttk.Notebook(self.root)
        self.notebook.pack(fill="both", expand=True, padx=10, pady=5)

        # Tabs
        self.calculator_panel = CalculatorPanel(self.notebook, self.service)
        self.notebook.add(self.calculator_panel, text="Calculator")

        self.converter_panel = ConverterPanel(self.notebook, self.service)
        self.notebook.add(self.converter_panel, text="Converter")

        self.reference_panel = ReferencePanel(
            self.notebook,
            chart_start=self.config["chart_start"],
            chart_end=self.config["chart_end"],
        )
        self.notebook.add(self.reference_panel, text="Reference")

        # Status
        mode = "strict" if self.service.strict else "lenient"
        self.status_var = tk.StringVar(value=f"Ready ({mode} numeral parsing)")
        ttk.Label(self.root, textvariable=self.status_var, relief=tk.SUNKEN).pack(side="bottom", fill="x")

        self.calculator_panel.input1_entry.focus_set()
