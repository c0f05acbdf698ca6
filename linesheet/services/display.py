from __future__ import annotations

from ..models.page_view import PageView
from ..models.record import LineSheetRecord

"""Display formatting for line sheet rendering surfaces.

Plain-text versions of what the grid/table surfaces show: currency and
margin cells, "N/A" placeholders, status emphasis and the pagination lines.
"""

NOT_AVAILABLE = "N/A"


def format_currency(amount: float) -> str:
    """Render a cost cell: ``$12.50``."""
    return f"${amount:.2f}"


def format_margin(margin: float) -> str:
    """Render a margin cell: ``25.00%``."""
    return f"{margin:.2f}%"


def format_balance(balance: float) -> str:
    # zero balance is not shown
    return format_currency(balance) if balance > 0 else NOT_AVAILABLE


def format_bulk_lead_time(value: str) -> str:
    return value or NOT_AVAILABLE


def is_emphasized(record: LineSheetRecord, emphasized_status: str = "In Production") -> bool:
    """True when the status badge renders with strong emphasis."""
    return record.get("status", "") == emphasized_status


def render_range_line(view: PageView) -> str:
    """Footer text: "Showing X-Y of Z items".

    Examples:
        >>> from linesheet.models.page_view import PageView
        >>> v = PageView(variant="client", records=[], total_pages=2, current_page=2,
        ...     range_start=10, range_end=12, filtered_count=12, total_count=12,
        ...     categories=[], statuses=[], search_term="", category_filter="All",
        ...     status_filter="All")
        >>> render_range_line(v)
        'Showing 10-12 of 12 items'
    """
    return f"Showing {view.range_start}-{view.range_end} of {view.filtered_count} items"


def render_page_line(view: PageView) -> str:
    return f"Page {view.current_page} of {view.total_pages}"


def render_summary_line(view: PageView) -> str:
    """One-line state summary, logged by the CLI at SUMMARY level.

    Format:
        variant={variant} items={filtered}/{total} page={page}/{pages}
        range={start}-{end} search={search!r} category={category} status={status}
    """
    return (
        f"variant={view.variant} "
        f"items={view.filtered_count}/{view.total_count} "
        f"page={view.current_page}/{view.total_pages} "
        f"range={view.range_start}-{view.range_end} "
        f"search={view.search_term!r} "
        f"category={view.category_filter} "
        f"status={view.status_filter}"
    )


def record_cells(view: PageView, index: int, emphasized_status: str = "In Production") -> dict[str, str]:
    """Display cells for ``view.records[index]`` in table column order."""
    r = view.records[index]
    status = r.get("status", "")
    if is_emphasized(r, emphasized_status):
        status = f"*{status}*"
    if view.variant == "internal":
        margin = view.margins[index] if view.margins is not None else 0.0
        return {
            "Name": r.get("name", ""),
            "Category": r.get("category", ""),
            "Status": status,
            "Min Order": str(r.get("minOrderQuantity", 0)),
            "Sample Cost": format_currency(r.get("sampleCost", 0.0)),
            "Production Cost": format_currency(r.get("productionCost", 0.0)),
            "Factory Cost": format_currency(r.get("factoryCost", 0.0)),
            "Margin": format_margin(margin),
            "Shipping": r.get("shipping", ""),
            "Sample Lead Time": r.get("sampleLeadTime", ""),
            "Bulk Lead Time": format_bulk_lead_time(r.get("bulkLeadTime", "")),
            "Sizes": r.get("sizes", ""),
            "Material": r.get("fabricMaterial", ""),
            "Note": r.get("note", ""),
            "Alibaba URL": "Link" if r.get("alibabaUrl") else "",
        }
    return {
        "Name": r.get("name", ""),
        "Category": r.get("category", ""),
        "Min Order": str(r.get("minOrderQuantity", 0)),
        "Sample Lead Time": r.get("sampleLeadTime", ""),
        "Bulk Lead Time": format_bulk_lead_time(r.get("bulkLeadTime", "")),
        "Status": status,
        "Sizes": r.get("sizes", ""),
        "Material": r.get("fabricMaterial", ""),
        "Balance": format_balance(r.get("balance", 0.0)),
    }


def render_table(view: PageView, emphasized_status: str = "In Production") -> list[str]:
    """Tab-separated header plus one line per record on the page."""
    if view.is_empty:
        return []
    rows = [record_cells(view, i, emphasized_status) for i in range(len(view.records))]
    lines = ["\t".join(rows[0].keys())]
    lines.extend("\t".join(row.values()) for row in rows)
    return lines


def render_grid(view: PageView, emphasized_status: str = "In Production") -> list[str]:
    """Card-style block per record (client grid layout)."""
    lines: list[str] = []
    for i in range(len(view.records)):
        cells = record_cells(view, i, emphasized_status)
        lines.append(f"[{cells['Name']}] {cells['Status']}")
        lines.append(f"  Category: {cells['Category']}")
        lines.append(f"  Min Order: {cells['Min Order']}")
        lines.append(f"  Sample Lead Time: {cells['Sample Lead Time']}")
        lines.append(f"  Bulk Lead Time: {cells['Bulk Lead Time']}")
        lines.append(f"  Sizes: {cells['Sizes']}")
        lines.append(f"  Material: {cells['Material']}")
        if view.records[i].get("balance", 0.0) > 0:
            lines.append(f"  Balance Due: {cells['Balance']}")
    return lines
