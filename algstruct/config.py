"""
Rendering configuration.

All text output of the library is plain decimal.  Only the decoration
around it (indeterminate name, separators, brackets) is configurable.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class FormatConfig:
    """Decoration used when rendering composite values.

    Polynomial terms render as  <coefficient><indeterminate><power_marker><n>
    joined by term_separator, highest power first.
    """
    indeterminate: str = "x"
    power_marker: str = "^"
    term_separator: str = " + "
    coset_brackets: Tuple[str, str] = ("[", "]")
    pair_brackets: Tuple[str, str] = ("(", ")")
    pair_separator: str = ", "

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_FORMAT = FormatConfig()
