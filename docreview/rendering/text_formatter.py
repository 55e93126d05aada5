"""Plain-text layout of rendered panels for terminal output."""

from docreview.rendering.models import Badge, Cell, IssueCard, Panel, Table


def format_panels(panels: list[Panel]) -> str:
    return "\n\n".join(format_panel(panel) for panel in panels)


def format_panel(panel: Panel) -> str:
    heading = f"{panel.icon} {panel.title}".strip()
    if panel.count is not None:
        heading += f" ({panel.count})"
    lines = [heading, "=" * len(heading)]

    if panel.items:
        width = max(len(item.label) for item in panel.items)
        for item in panel.items:
            marker = "*" if item.highlight else " "
            lines.append(f"{marker} {item.label.ljust(width)} : {item.value}")
    for bullet_list in panel.lists:
        if bullet_list.title:
            lines.append(f"{bullet_list.title}:")
        lines.extend(f"  - {entry}" for entry in bullet_list.entries)
    if panel.table is not None:
        lines.extend(_format_table(panel.table))
    for card in panel.cards:
        lines.extend(_format_card(card))
    if panel.empty_state is not None:
        lines.append(f"{panel.empty_state.icon} {panel.empty_state.message}")
    if panel.text is not None:
        lines.append(panel.text)
    return "\n".join(lines)


def _cell_text(cell: Cell) -> str:
    if isinstance(cell, Badge):
        return f"[{cell.text}]"
    return cell


def _format_table(table: Table) -> list[str]:
    rows = [[_cell_text(c) for c in row] for row in table.rows]
    widths = [len(h) for h in table.headers]
    for row in rows:
        for i, text in enumerate(row):
            widths[i] = max(widths[i], len(text))

    def line(cells: list[str]) -> str:
        return " | ".join(text.ljust(widths[i]) for i, text in enumerate(cells)).rstrip()

    return [
        line(table.headers),
        "-+-".join("-" * w for w in widths),
        *(line(row) for row in rows),
    ]


def _format_card(card: IssueCard) -> list[str]:
    lines = [f"- {card.heading} {_cell_text(card.badge)}", f"    {card.description}"]
    if card.recommendation is not None:
        lines.append(f"    Recommendation: {card.recommendation}")
    return lines
