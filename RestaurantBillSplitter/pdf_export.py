"""
PDF Export Module

Renders a split bill as a one-page PDF report.

The report is built as HTML and converted with xhtml2pdf. It includes the
date, location, subtotal, tip, total and the per-person breakdown.

Functions:
    build_html: Render the HTML report for a BillOutput.
    render_pdf: Convert the report to PDF bytes.
"""

import io
from html import escape

from xhtml2pdf import pisa

from bill import BillOutput
from exceptions import BillSplitterError
from utils import format_currency


def build_html(output: BillOutput, currency_symbol: str = "$") -> str:
    """Render the HTML report for a split bill."""
    rows = "".join(
        f"<tr><td>{escape(item.name)}</td><td>{format_currency(item.amount, currency_symbol)}</td></tr>"
        for item in output.items
    ) or '<tr><td colspan="2">No participants</td></tr>'

    return f"""
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="UTF-8">
        <style>
            body {{ font-family: Arial, sans-serif; padding: 20px; color: #333; }}
            h1 {{ color: #667eea; border-bottom: 2px solid #667eea; padding-bottom: 10px; }}
            h2 {{ color: #444; margin-top: 25px; }}
            table {{ width: 100%; border-collapse: collapse; margin: 15px 0; }}
            th, td {{ border: 1px solid #ddd; padding: 10px; text-align: left; }}
            th {{ background: #667eea; color: white; }}
            .highlight {{ background: #e8f5e9; padding: 15px; margin: 15px 0; }}
        </style>
    </head>
    <body>
        <h1>{escape(output.location)}</h1>
        <p><strong>Date:</strong> {escape(output.date)}</p>

        <div class="highlight">
            <p><strong>Subtotal:</strong> {format_currency(output.sub_total, currency_symbol)}</p>
            <p><strong>Tip:</strong> {format_currency(output.tip, currency_symbol)}</p>
            <p><strong>Total:</strong> {format_currency(output.total_amount, currency_symbol)}</p>
        </div>

        <h2>Split</h2>
        <table>
            <tr><th>Person</th><th>Amount</th></tr>
            {rows}
        </table>
    </body>
    </html>
    """


def render_pdf(output: BillOutput, currency_symbol: str = "$") -> bytes:
    """
    Convert a split bill to PDF bytes.

    Raises:
        BillSplitterError: If xhtml2pdf reports conversion errors.
    """
    pdf_buffer = io.BytesIO()
    status = pisa.CreatePDF(io.StringIO(build_html(output, currency_symbol)), dest=pdf_buffer)
    if status.err:
        raise BillSplitterError(f"PDF conversion failed with {status.err} error(s)")
    return pdf_buffer.getvalue()
