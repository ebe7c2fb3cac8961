"""
Core utility functions for the Roman Numeral Calculator application.
"""

import os
import subprocess
import platform
from pathlib import Path

from core.logger import setup_logger

logger = setup_logger(__name__)


def open_file(file_path: str | Path) -> bool:
    """
    Opens a file (e.g. an exported chart) using the system's default application.

    Args:
        file_path: Path to the file to open (str or Path object)

    Returns:
        True if successful, False otherwise
    """
    file_path = Path(file_path)

    if not file_path.exists():
        logger.warning(f"File not found: {file_path}")
        return False

    system = platform.system()

    try:
        if system == 'Windows':
            os.startfile(str(file_path))
        elif system == 'Darwin':  # macOS
            subprocess.run(['open', str(file_path)], check=True)
        else:  # Linux
            subprocess.run(['xdg-open', str(file_path)], check=True)
    except (OSError, subprocess.CalledProcessError) as e:
        logger.error(f"Error opening file: {e}")
        return False

    return True
