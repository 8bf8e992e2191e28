from __future__ import annotations

from typing import Optional


# Formatting noise stripped from anywhere in the input: newline, carriage
# return, tab, space and hyphen
_NOISE_TABLE = str.maketrans("", "", "\n\r\t -")


def normalize(raw: Optional[str]) -> str:
    """
    Turn a compact or human-formatted SWIFT/BIC code into its formatted form.

    Args:
        raw: Input as typed by a user or read from a document, e.g.
            "deut-de-ff 500". None is treated as "".

    Returns:
        The code with all formatting noise removed, uppercased. May be "".
    """
    if raw is None:
        return ""
    return raw.translate(_NOISE_TABLE).upper()
