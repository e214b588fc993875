# scooter_rentals/cli.py
import numpy as np
from colorama import Fore, Style
from .config import USE_ANY_KEY_LABEL


class InputError(Exception):
    """The player's input couldn't be read or understood."""


class InputClosedError(InputError):
    """Stdin has closed. Nothing more is coming."""


def _read_line() -> str:
    try:
        return input().strip()
    except EOFError as e:
        raise InputClosedError("No input available.") from e


def get_input_int() -> int:
    text = _read_line()
    try:
        val = int(text)
    except ValueError as e:
        raise InputError(f"'{text}' is not a whole number.") from e
    if val < 0:
        raise InputError(f"'{text}' is not a positive whole number.")
    return val


def get_input_float() -> float:
    text = _read_line()
    try:
        val = float(text)
    except ValueError as e:
        raise InputError(f"'{text}' is not a number.") from e
    if not np.isfinite(val):
        raise InputError(f"'{text}' is not a real number.")
    return val


def get_input_string() -> str:
    return _read_line()


def get_input_nothing():
    try:
        _read_line()
    except InputError:
        pass


def output(line: str, color: str = ""):
    if color:
        print(f"{color}{line}{Style.RESET_ALL}")
    else:
        print(line)


def output_log(log: str):
    """Print a CATEGORY: message log line, coloured by category."""
    if log.startswith(("CRITICAL", "DECLINED")):
        output(log, Fore.RED)
    elif log.startswith("NEWS"):
        output(log, Fore.CYAN)
    else:
        output(log, Fore.LIGHTBLACK_EX)


def say_any_key():
    if USE_ANY_KEY_LABEL:
        output("Press return to continue.")
