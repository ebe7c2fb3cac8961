from tkinter import ttk

from core.config import ACCENT, DARK_BG, DARK_FG, DARK_PANEL, ERROR_COLOR, RESULT_COLOR


def apply_theme(root, theme: str = "dark") -> ttk.Style:
    """Applies the ttk 'clam' theme, recoloured dark unless theme == 'light'."""
    style = ttk.Style(root)
    style.theme_use('clam')

    # Colored labels are used in both themes
    style.configure("Result.TLabel", foreground=RESULT_COLOR, font=("Segoe UI", 14, "bold"))
    style.configure("Error.TLabel", foreground=ERROR_COLOR)
    style.configure("Heading.TLabel", font=("Segoe UI", 14, "bold"))

    if theme == "light":
        return style

    root.configure(background=DARK_BG)

    style.configure(".", background=DARK_BG, foreground=DARK_FG, fieldbackground=DARK_PANEL)
    style.configure("TFrame", background=DARK_BG)
    style.configure("TLabelframe", background=DARK_BG, foreground=DARK_FG)
    style.configure("TLabelframe.Label", background=DARK_BG, foreground=DARK_FG)
    style.configure("TLabel", background=DARK_BG, foreground=DARK_FG)
    style.configure("Result.TLabel", background=DARK_BG)
    style.configure("Error.TLabel", background=DARK_BG)
    style.configure("Heading.TLabel", background=DARK_BG)
    style.configure("TEntry", fieldbackground=DARK_PANEL, foreground=DARK_FG, insertcolor=DARK_FG)
    style.configure("TButton", background=DARK_PANEL, foreground=DARK_FG)
    style.map("TButton", background=[("active", ACCENT)])
    style.configure("Toolbutton", background=DARK_PANEL, foreground=DARK_FG)
    style.map("Toolbutton", background=[("selected", ACCENT), ("active", ACCENT)])
    style.configure("TNotebook", background=DARK_BG)
    style.configure("TNotebook.Tab", background=DARK_PANEL, foreground=DARK_FG)
    style.map("TNotebook.Tab", background=[("selected", ACCENT)])
    style.configure("Treeview", background=DARK_PANEL, fieldbackground=DARK_PANEL, foreground=DARK_FG)
    style.configure("Treeview.Heading", background=DARK_BG, foreground=DARK_FG)
    style.configure("TSpinbox", fieldbackground=DARK_PANEL, foreground=DARK_FG)

    return style
