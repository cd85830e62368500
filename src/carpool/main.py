# carpool/main.py
import argparse
import sys

from pydantic import ValidationError

from carpool.app.build import build
from carpool.errors import MalformedInputError
from carpool.io.inputs import load_history
from carpool.runtime.types import DEFAULT_METHOD, SelectionMethod

METHODS_HELP = """\
Methods:
  Units (Fair) - The Fagin/Williams method. (default)
  Subsets (Fair) - The brute force method.
  Pairs (Unfair) - The Carpool v1 method.
  Points (Unfair) - The spreadsheet method.
"""


def method_name(s: str) -> str:
    return SelectionMethod.parse(s).value


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="carpool",
        description=(
            "Work out whose turn it is to drive. Participants are the letter codes of the"
            " people who will show up for the car pool; without them, selection is based"
            " on everyone showing up."
        ),
        epilog=METHODS_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("filename", help="ride history file")
    p.add_argument("participants", nargs="?", default=None, help="codes of who shows up")
    p.add_argument("-v", "--verbose", action="store_true", help="print details of the method")
    p.add_argument(
        "-m",
        "--method",
        default=DEFAULT_METHOD.value,
        type=method_name,
        help="method used to select a driver",
    )
    p.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="emit JSON logs on stderr at this level",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    cfg = {
        "method": {"kind": args.method, "verbose": args.verbose},
        "present": args.participants,
        "log": {"enabled": args.log_level is not None, "level": args.log_level or "INFO"},
    }

    try:
        history = load_history(args.filename)
        app = build(cfg, history)
    except FileNotFoundError:
        print(f"File '{args.filename}' does not exist.")
        return 1
    except (MalformedInputError, ValidationError) as e:
        print(f"Input error: {e}")
        return 2

    print(app.select().report(history))
    return 0


if __name__ == "__main__":
    sys.exit(main())
