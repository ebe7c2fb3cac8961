import argparse
import json
import sys
from pathlib import Path

from core.config import load_app_config
from core.exceptions import CalculatorError, create_unknown_error
from core.logger import set_verbose, setup_logger
from services.calculator_service import evaluate, format_numeral, parse
from services.chart_service import build_chart, export_chart

logger = setup_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Roman Numeral Calculator CLI Adapter")
    parser.add_argument('--verbose', action='store_true', help='Show debug logging on stderr')
    parser.add_argument('--config', required=False, help='Path to calculator_config.json')

    subparsers = parser.add_subparsers(dest='command', required=True)

    # Command: Parse numeral
    cmd_parse = subparsers.add_parser('parse', help='Convert a Roman numeral to an integer')
    cmd_parse.add_argument('--numeral', required=True, help='Roman numeral, e.g. XIV')
    cmd_parse.add_argument('--strict', action='store_true', help='Reject non-standard forms such as IIII')

    # Command: Format number
    cmd_format = subparsers.add_parser('format', help='Convert an integer (1-3999) to a Roman numeral')
    cmd_format.add_argument('--number', required=True, type=int, help='Whole number, e.g. 14')

    # Command: Evaluate
    cmd_eval = subparsers.add_parser('evaluate', help='Apply an operation to two Roman numerals')
    cmd_eval.add_argument('--first', required=True, help='First numeral')
    cmd_eval.add_argument('--second', required=True, help='Second numeral')
    cmd_eval.add_argument('--op', default='add', help='add, subtract, multiply, divide (or + - * /)')
    cmd_eval.add_argument('--strict', action='store_true', help='Reject non-standard forms such as IIII')

    # Command: Chart
    cmd_chart = subparsers.add_parser('chart', help='Print or export a conversion chart')
    cmd_chart.add_argument('--start', type=int, default=None, help='First number of the chart')
    cmd_chart.add_argument('--end', type=int, default=None, help='Last number of the chart')
    cmd_chart.add_argument('--out', required=False, help='Output file (.csv or .xlsx)')

    return parser


def _error_envelope(error: CalculatorError) -> dict:
    return {"status": "error", "message": error.message, "error": error.to_dict()}


def run(argv=None) -> dict:
    """Runs one CLI command and returns the JSON envelope it prints."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        set_verbose(True)

    config = load_app_config(Path(args.config) if args.config else None)
    strict = getattr(args, 'strict', False) or config["strict_numerals"]

    # Output structure: { "status": "ok", "data": ... } or { "status": "error", "message": ..., "error": ... }
    try:
        if args.command == 'parse':
            result = parse(args.numeral, strict=strict)
            if not result.ok:
                return _error_envelope(result.error)
            return {"status": "ok", "data": result.to_dict()}

        elif args.command == 'format':
            return {
                "status": "ok",
                "data": {"number": args.number, "numeral": format_numeral(args.number)}
            }

        elif args.command == 'evaluate':
            result = evaluate(args.first, args.second, args.op, strict=strict)
            if not result.ok:
                return _error_envelope(result.error)
            return {"status": "ok", "data": result.to_dict()}

        elif args.command == 'chart':
            start = args.start if args.start is not None else config["chart_start"]
            end = args.end if args.end is not None else config["chart_end"]

            if args.out:
                written = export_chart(args.out, start, end)
                return {"status": "ok", "message": f"Saved {end - start + 1} rows to {written}"}

            df = build_chart(start, end)
            return {
                "status": "ok",
                "data": {
                    "columns": list(df.columns),
                    "rows": df.values.tolist()
                }
            }

    except CalculatorError as e:
        return _error_envelope(e)
    except OSError as e:
        logger.error(f"{args.command} failed: {e}")
        return _error_envelope(create_unknown_error(e, args.command))


def main(argv=None):
    output = run(argv)
    print(json.dumps(output, default=str))
    if output.get("status") != "ok":
        sys.exit(1)


if __name__ == "__main__":
    main()
