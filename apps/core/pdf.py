"""
PDF building helpers on top of reportlab's platypus layer.

Both order documents and monthly reports are built as a list of flowables
("story") and rendered in memory; callers get raw bytes back and decide
whether to stream or persist them.
"""

from decimal import Decimal
from io import BytesIO

from django.conf import settings
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle


def get_styles():
    """Return reportlab's sample stylesheet."""
    return getSampleStyleSheet()


def format_money(value, signed=False):
    """Format a Decimal amount with the configured currency symbol."""
    amount = Decimal(value or 0).quantize(Decimal('0.01'))
    number = f'{amount:+,.2f}' if signed else f'{amount:,.2f}'
    return f'{settings.CURRENCY_SYMBOL} {number}'


def data_table(rows, col_widths=None, header=True):
    """Build a bordered table; the first row is styled as a header."""
    table = Table(rows, colWidths=col_widths, hAlign='LEFT')
    style = [
        ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
        ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
        ('FONTSIZE', (0, 0), (-1, -1), 10),
    ]
    if header:
        style += [
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#F3E5D8')),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ]
    table.setStyle(TableStyle(style))
    return table


def render_pdf(story, title=''):
    """Render a list of flowables to PDF bytes."""
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=36,
        rightMargin=36,
        topMargin=48,
        bottomMargin=36,
        title=title,
        author=settings.SHOP_NAME,
    )
    doc.build(story)
    return buffer.getvalue()
