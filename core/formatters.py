# core/formatters.py

# all pure text utilities
# must never import from models!

from typing import Any

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_list_with_and(items: list[Any]) -> str:
    if not items:
        return ""

    if len(items) == 1:
        return str(items[0])

    if len(items) == 2:
        return " and ".join(str(i) for i in items)

    return ", ".join(str(i) for i in items[:-1]) + ", and " + str(items[-1])


def format_divider(width: int = 40, char: str = "-") -> str:
    return char * width


def truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text

    return text[: max(width - 3, 0)] + "..."


# === chart formatters ===


def format_bar(label: str, count: int, total: int, width: int = 30) -> str:
    """
    Renders one horizontal bar of a text histogram, e.g. `A+   | ####        |  2`.

    The bar is scaled against `total` so a full-width bar means every record falls in this bucket.
    """
    filled = round(width * count / total) if total else 0
    bar = "#" * filled

    return f"{label:<4} | {bar:<{width}} | {count:>2}"
