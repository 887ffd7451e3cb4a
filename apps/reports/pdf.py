"""
Monthly closing document.
"""

from xml.sax.saxutils import escape

from django.conf import settings
from django.utils import timezone
from reportlab.platypus import Paragraph, Spacer

from apps.core.pdf import data_table, format_money, get_styles, render_pdf


def render_monthly_report_pdf(*, month, year, revenue, expenses, profit):
    """
    Render the closing summary for one month to PDF bytes.

    Profit is printed with an explicit sign so a loss stands out.
    """
    styles = get_styles()
    generated = timezone.localtime().strftime('%d/%m/%Y %H:%M')

    story = [
        Paragraph(f'<b>{escape(settings.SHOP_NAME)}</b>', styles['Title']),
        Paragraph(f'Monthly closing - {month:02d}/{year}', styles['Heading2']),
        Paragraph(f'Generated at {generated}', styles['Normal']),
        Spacer(1, 18),
        data_table([
            ['', 'Amount'],
            ['Revenue', format_money(revenue)],
            ['Expenses', format_money(expenses)],
            ['Net profit', format_money(profit, signed=True)],
        ], col_widths=[200, 150]),
        Spacer(1, 12),
        Paragraph(
            'Revenue counts every order created in the month except cancelled ones.',
            styles['Italic'],
        ),
    ]
    return render_pdf(story, title=f'Monthly closing {month:02d}/{year}')
