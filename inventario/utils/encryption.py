from types import MappingProxyType
from typing import Mapping, Optional

from inventario.core.config import settings

# Cyclic A-Z table: A..I -> 1..9, J -> 0, then the cycle repeats from K.
TABLE_A = MappingProxyType({
    letter: str((index + 1) % 10)
    for index, letter in enumerate("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
})

# Ten-letter key "HUBLOTECAS": the n-th letter stands for digit n.
TABLE_B = MappingProxyType({
    letter: str(index) for index, letter in enumerate("HUBLOTECAS")
})

COST_TABLES = {"A": TABLE_A, "B": TABLE_B}


def normalize_cost(cost: Optional[str]) -> str:
    """Uppercase and strip an encoded cost; ``None`` becomes ``""``."""
    return (cost or "").upper().strip()


class CostCodec:
    """Turns a letter-coded cost into its numeric value using a fixed table."""

    def __init__(self, table: Mapping[str, str]):
        self.table = table

    def decode(self, encoded: Optional[str]) -> int:
        """Decode ``encoded`` into an int.

        Each letter maps to one digit and the digits are concatenated in order,
        so "HU" and "UH" give different values. Characters outside the table
        are skipped. An empty result decodes to 0.
        """
        digits = "".join(
            self.table[ch] for ch in normalize_cost(encoded) if ch in self.table
        )
        try:
            return int(digits)
        except ValueError:
            return 0

    def is_valid_encoding(self, encoded: Optional[str]) -> bool:
        normalized = normalize_cost(encoded)
        return bool(normalized) and all(ch in self.table for ch in normalized)


def format_cost(value: int) -> str:
    """Format a decoded cost as es-CO currency text, e.g. 1234 -> '1.234,00'."""
    text = f"{value:,.2f}"
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def get_cost_table(name: str) -> Mapping[str, str]:
    try:
        return COST_TABLES[name.upper()]
    except KeyError:
        raise ValueError(f"Unknown cost table '{name}'")


cost_codec = CostCodec(get_cost_table(settings.COST_TABLE))
