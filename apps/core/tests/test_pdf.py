from decimal import Decimal
from django.test import override_settings
from reportlab.platypus import Paragraph
from apps.core.pdf import data_table, format_money, get_styles, render_pdf


class TestFormatMoney:
    """Tests for format_money."""

    @override_settings(CURRENCY_SYMBOL='R$')
    def test_plain(self):
        assert format_money(Decimal('1234.5')) == 'R$ 1,234.50'

    @override_settings(CURRENCY_SYMBOL='R$')
    def test_none_is_zero(self):
        assert format_money(None) == 'R$ 0.00'

    @override_settings(CURRENCY_SYMBOL='$')
    def test_signed(self):
        assert format_money(Decimal('110'), signed=True) == '$ +110.00'
        assert format_money(Decimal('-70'), signed=True) == '$ -70.00'


class TestRenderPdf:
    """Tests for render_pdf."""

    def test_renders_pdf_bytes(self):
        styles = get_styles()
        story = [
            Paragraph('Hello', styles['Title']),
            data_table([['Item', 'Qty'], ['Cake', '1']]),
        ]

        content = render_pdf(story, title='Test')

        assert content.startswith(b'%PDF')
