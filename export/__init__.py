"""Export-Modul: Terminal-Darstellung (Rich) für Karte, Tages- und Wochenplan."""

from export.card_renderer import FreeTimeCard, build_card, render_card
from export.tui_renderer import render_today_table, render_week_table

__all__ = ["FreeTimeCard", "build_card", "render_card", "render_today_table", "render_week_table"]
