import pandas as pd
from pathlib import Path
from typing import Union

from core.config import MIN_ROMAN_VALUE, MAX_ROMAN_VALUE
from core.exceptions import (
    create_invalid_range_error,
    create_result_out_of_range_error,
    create_unsupported_format_error,
)
from core.logger import setup_logger
from core.roman import ROMAN_SYMBOL_VALUES, arabic_to_roman

logger = setup_logger(__name__)

CHART_COLUMNS = ["Arabic", "Roman"]

# (symbol, value) rows for the reference panel
SYMBOL_TABLE = [(symbol, value) for symbol, value in ROMAN_SYMBOL_VALUES.items()]

SUBTRACTIVE_EXAMPLES = [("IV", 4), ("IX", 9), ("XL", 40), ("XC", 90), ("CD", 400), ("CM", 900)]


def build_chart(start: int = 1, end: int = 100) -> pd.DataFrame:
    """
    Builds a conversion chart for every number in [start, end].

    Raises:
        EvaluationError: RESULT_OUT_OF_RANGE if a bound lies outside 1-3999
        ExportError: INVALID_RANGE if start > end
    """
    for bound in (start, end):
        if bound < MIN_ROMAN_VALUE or bound > MAX_ROMAN_VALUE:
            raise create_result_out_of_range_error(bound)
    if start > end:
        raise create_invalid_range_error(start, end)

    numbers = list(range(start, end + 1))
    return pd.DataFrame({
        "Arabic": numbers,
        "Roman": [arabic_to_roman(n) for n in numbers],
    }, columns=CHART_COLUMNS)


def export_chart(path: Union[str, Path], start: int = 1, end: int = 100) -> Path:
    """
    Writes a conversion chart to .csv or .xlsx, chosen by the file extension.

    Returns:
        The path written to

    Raises:
        ExportError: UNSUPPORTED_FORMAT for any other extension
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in ('.csv', '.xlsx'):
        raise create_unsupported_format_error(path.name)

    df = build_chart(start, end)

    if suffix == '.csv':
        df.to_csv(path, index=False)
    else:
        df.to_excel(path, index=False, sheet_name="Roman Numerals", engine="openpyxl")

    logger.info(f"Exported chart {start}-{end} ({len(df)} rows) to {path}")
    return path
