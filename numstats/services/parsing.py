# numstats/services/parsing.py
import re

INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)


def parse_numbers(text: str) -> list[int]:
    """
    Parse newline-separated integers, skipping lines that are not integers.
    Line order is preserved.
    """
    numbers = []
    for line in text.split("\n"):
        candidate = line.strip()
        if not INTEGER_RE.fullmatch(candidate):
            continue
        try:
            numbers.append(int(candidate))
        except ValueError:
            # Longer than the interpreter's int string conversion limit
            continue
    return numbers
