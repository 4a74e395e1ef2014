import logging
import re
import secrets
import string
import time
from typing import Callable

from inventario.core.config import settings

logger = logging.getLogger(__name__)

# Latin alphabet without I and O so printed codes stay easy to read and type
ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ"
BARCODE_LENGTH = 10
FALLBACK_SUFFIX_LENGTH = 3


def random_letters(count: int) -> str:
    return ''.join(secrets.choice(ALPHABET) for _ in range(count))


def random_digits(count: int) -> str:
    return ''.join(secrets.choice(string.digits) for _ in range(count))


def only_digits(value: str) -> str:
    return re.sub(r"\D", "", value or "")


def only_letters(value: str) -> str:
    return re.sub(r"[^A-Z]", "", (value or "").upper())


def render_layout_a(product_code: str, encoded_cost: str) -> str:
    """6 random letters + digits of the product code + letters of the cost."""
    return random_letters(6) + only_digits(product_code) + only_letters(encoded_cost)


def render_layout_b(product_code: str, encoded_cost: str) -> str:
    """5 random letters + last 5 digits of the product code, 10 chars total."""
    digits = only_digits(product_code)
    tail = digits[-5:].zfill(5) if digits else random_digits(5)
    return (random_letters(5) + tail)[:BARCODE_LENGTH]


LAYOUTS = {"A": render_layout_a, "B": render_layout_b}


def get_layout(name: str) -> Callable[[str, str], str]:
    try:
        return LAYOUTS[name.upper()]
    except KeyError:
        raise ValueError(f"Unknown barcode layout '{name}'")


def timestamp_suffix() -> str:
    return str(time.time_ns() // 1_000_000)[-FALLBACK_SUFFIX_LENGTH:]


class BarcodeGenerator:

    def __init__(self, layout: str = "B", max_attempts: int = 10):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.layout = layout.upper()
        self.render = get_layout(layout)
        self.max_attempts = max_attempts

    def render_candidate(self, product_code: str, encoded_cost: str) -> str:
        return self.render(product_code, encoded_cost)

    def generate_unique(self, product_code: str, encoded_cost: str,
                        exists_fn: Callable[[str], bool]) -> str:
        """Render candidates until ``exists_fn`` reports one as unused.

        After ``max_attempts`` collisions the last candidate gets the last three
        digits of the current epoch milliseconds as its tail and is returned
        without another lookup.
        """
        candidate = ""
        for attempt in range(self.max_attempts):
            candidate = self.render_candidate(product_code, encoded_cost)
            if not exists_fn(candidate):
                return candidate
            logger.info(f"Barcode collision on attempt {attempt + 1}/{self.max_attempts}: {candidate}")

        fallback = candidate[:-FALLBACK_SUFFIX_LENGTH] + timestamp_suffix()
        logger.warning(
            "Barcode generation exhausted %s attempts for codigo=%s, using timestamp fallback %s",
            self.max_attempts, product_code, fallback
        )
        return fallback


barcode_generator = BarcodeGenerator(settings.BARCODE_LAYOUT, settings.BARCODE_MAX_ATTEMPTS)
