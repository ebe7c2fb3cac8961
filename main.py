import tkinter as tk

from core.config import load_app_config
from ui.app_window import AppWindow


def main():
    config = load_app_config()

    root = tk.Tk()
    app = AppWindow(root, config)
    root.mainloop()


if __name__ == "__main__":
    main()
