# HTML bodies for sick-leave and vacation notification mails.
# Author: NEA HR Engineering
# Date: 2025-07-04
# Version: 0.1.0

from datetime import datetime
from html import escape
from typing import List, Optional, Tuple

_STYLE = """
    body { font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px; }
    .header { background-color: #f8f9fa; border-left: 4px solid {accent}; padding: 15px; margin-bottom: 20px; }
    .header h2 { margin: 0; color: {accent}; font-size: 24px; }
    .info-table { width: 100%; border-collapse: collapse; margin-bottom: 20px; }
    .info-table tr { border-bottom: 1px solid #eee; }
    .info-label { padding: 12px 0; font-weight: bold; width: 40%; color: #666; }
    .info-value { padding: 12px 0; color: #333; }
    .timestamp { font-size: 14px; color: #666; margin: 20px 0 30px; font-style: italic; }
    .signature { border-top: 1px solid #eee; padding-top: 20px; margin-top: 30px; font-size: 12px; color: #666; }
    .signature img { max-width: 80px; height: auto; }
"""

SICK_ACCENT = "#dc3545"
VACATION_ACCENT = "#fd7e14"


def _render(title: str, accent: str, rows: List[Tuple[str, Optional[str]]], stamp_label: str, now: datetime) -> str:
    table_rows = "\n".join(
        f'      <tr><td class="info-label">{escape(label)}</td><td class="info-value">{escape(value or "-")}</td></tr>'
        for label, value in rows
    )
    # CSS braces rule out str.format here
    style = _STYLE.replace("{accent}", accent)
    return f"""<!DOCTYPE html>
<html lang="de">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <style>{style}</style>
</head>
<body>
  <div class="header"><h2>{escape(title)}</h2></div>
  <table class="info-table">
{table_rows}
  </table>
  <div class="timestamp">{stamp_label}: {now:%d.%m.%Y, %H:%M} Uhr</div>
  <div class="signature">Powered by <img src="cid:s2-logo" alt="S2 Software Logo"></div>
</body>
</html>
"""


def render_sick_email(name: str, reason: Optional[str] = None, expected_duration: Optional[str] = None,
                      additional_notes: Optional[str] = None, now: Optional[datetime] = None) -> Tuple[str, str]:
    """Returns (subject, html body) of a sick-leave notification."""
    rows = [("Mitarbeiter", name), ("Grund", reason), ("Voraussichtliche Dauer", expected_duration)]
    if additional_notes:
        rows.append(("Zusätzliche Informationen", additional_notes))
    body = _render("Krankmeldung", SICK_ACCENT, rows, "Gemeldet am", now or datetime.now())
    return f"Krankmeldung: {name}", body


def render_vacation_email(name: str, reason: Optional[str] = None, start_date: Optional[str] = None,
                          end_date: Optional[str] = None, additional_notes: Optional[str] = None,
                          now: Optional[datetime] = None) -> Tuple[str, str]:
    """Returns (subject, html body) of a vacation request notification."""
    rows = [("Mitarbeiter", name), ("Grund", reason), ("Von", start_date), ("Bis", end_date)]
    if additional_notes:
        rows.append(("Zusätzliche Informationen", additional_notes))
    body = _render("Urlaubsantrag", VACATION_ACCENT, rows, "Eingereicht am", now or datetime.now())
    return f"Urlaubsantrag: {name}", body
