from typing import Iterable, List, Literal, Optional, Sequence

from catalog.models import (
    CartLine,
    CatalogItem,
    Comparison,
    ItemDescription,
    OrderLine,
    Status,
)
from catalog.pricing import describe, line_subtotal


def format_amount(value: float) -> str:
    """
    Print an amount without trailing zeros: 850.0 -> "850", 722.50 -> "722.5".
    Rounded to cents first.
    """
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_rate(value: float) -> str:
    """Discount percent with up to 6 significant digits: 12.345 -> "12.345"."""
    return f"{value:g}"


def generate_markdown_table(
    headers: Optional[Sequence[str]],
    rows: Sequence[Sequence[object]],
    aligns: Optional[Sequence[Literal["l", "c", "r"]]] = None,
) -> str:
    """
    Generate a Markdown table.

    Args:
        headers: column headers, or None to promote the first row.
        rows: table rows, cells are converted with str().
        aligns: 'l', 'c' or 'r' per column, centered when omitted.
    """
    if not rows:
        return ""

    if not headers:
        headers, rows = rows[0], rows[1:]

    head = [str(h) for h in headers]
    body = [[str(cell) for cell in row] for row in rows]

    aligns = list(aligns) if aligns is not None else ["c"] * len(head)
    if len(aligns) != len(head):
        raise ValueError("Length of aligns must match number of headers.")

    markers = {"l": ":---", "c": ":---:", "r": "---:"}
    lines = [
        "| " + " | ".join(head) + " |",
        "| " + " | ".join(markers[a] for a in aligns) + " |",
    ]
    lines.extend("| " + " | ".join(row) + " |" for row in body)
    return "\n".join(lines)


CATALOG_COLUMNS = ["Kind", "Name", "ID", "Price", "After Discount", "Stock"]


def catalog_rows(items: Iterable[CatalogItem]) -> List[List[str]]:
    """One table row per item, following CATALOG_COLUMNS."""
    rows = []
    for item in items:
        desc = describe(item)
        rows.append(
            [
                item.kind.value,
                desc.name,
                item.ident,
                format_amount(desc.effective_price),
                (
                    format_amount(desc.discounted_price)
                    if desc.discounted_price is not None
                    else ""
                ),
                "out of stock" if desc.out_of_stock else str(desc.stock),
            ]
        )
    return rows


def describe_lines(desc: ItemDescription) -> List[str]:
    """Text lines for one item, in display order."""
    lines = []
    if desc.out_of_stock:
        lines.append("(Out of stock)")
    lines.append(f"Name: {desc.name}")
    lines.append(f"Price: {format_amount(desc.effective_price)}")
    if desc.discounted_price is not None:
        lines.append(
            f"Price (applying {format_rate(desc.rate)}% discount): "
            f"{format_amount(desc.discounted_price)}"
        )
    if desc.power is not None:
        lines.append(f"Power: {desc.power}")
    if desc.warranty is not None:
        lines.append(f"Warranty Time: {desc.warranty}")
    lines.append(f"Amount: {desc.stock}")
    return lines


def cart_line_lines(line: CartLine) -> List[str]:
    desc = describe(line.item)
    lines = [f"Name: {desc.name}", f"Price: {format_amount(desc.effective_price)}"]
    if desc.discounted_price is not None:
        lines.append(
            f"Price (applying {format_rate(desc.rate)}% discount): "
            f"{format_amount(desc.discounted_price)}"
        )
    lines.append(f"Quantity: {line.qty}")
    # subtotal only adds information when more than one unit is bought
    if line.qty != 1:
        lines.append(f"Subtotal: {format_amount(line_subtotal(line.item, line.qty))}")
    return lines


def render_item_md(desc: ItemDescription) -> str:
    body = "\n".join(f"- {text}" for text in describe_lines(desc))
    return f"### {desc.name}\n\n{body}"


def render_cart_md(lines: Iterable[CartLine], total: float) -> str:
    """Markdown listing of cart lines followed by the running total."""
    blocks = ["\n".join(f"- {text}" for text in cart_line_lines(line)) for line in lines]
    if not blocks:
        blocks = ["_Your cart is empty._"]
    return "\n\n".join(blocks) + f"\n\n**Total: {format_amount(total)}**"


def render_receipt(
    lines: Iterable[CartLine], total: float, charged: Optional[float] = None
) -> str:
    """
    Plain-text receipt printed once the order is placed.
    `charged` is added when some lines could not be fulfilled.
    """
    out = ["ORDER DETAILS:"]
    for line in lines:
        out.extend(cart_line_lines(line))
        out.append("")
    out.append(f"Total: {format_amount(total)}")
    if charged is not None:
        out.append(f"Charged: {format_amount(charged)}")
    return "\n".join(out)


def render_skipped(outcomes: Iterable[OrderLine]) -> List[str]:
    notes = []
    for o in outcomes:
        if o.status == Status.NOT_FOUND:
            notes.append(f"{o.item.name}: no longer in the catalog, not ordered")
        elif o.status == Status.STOCK_MISMATCH:
            notes.append(
                f"{o.item.name}: {o.qty} requested, only {o.item.stock} in stock, not ordered"
            )
    return notes


def comparison_sentence(first: str, second: str, result: Comparison) -> str:
    match result:
        case Comparison.EQUAL:
            return f"{first}'s price is equal to {second}'s price"
        case Comparison.MORE_EXPENSIVE:
            return f"{first} is more expensive than {second}"
        case Comparison.LESS_EXPENSIVE:
            return f"{first} is less expensive than {second}"
