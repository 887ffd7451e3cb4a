"""
Order documents: customer receipt and kitchen ticket.

The receipt lists items with unit prices, subtotals and the order total.
The kitchen ticket drops every price and highlights quantities, delivery
time and observations for the production team.
"""

import re
from xml.sax.saxutils import escape

from django.conf import settings
from django.utils import timezone
from reportlab.platypus import Paragraph, Spacer

from apps.core.pdf import data_table, format_money, get_styles, render_pdf

RECEIPT = 'receipt'
KITCHEN = 'kitchen'
DOCUMENT_TYPES = (RECEIPT, KITCHEN)


def _local(dt, fmt='%d/%m/%Y %H:%M'):
    if dt is None:
        return '-'
    return timezone.localtime(dt).strftime(fmt)


def order_pdf_filename(order):
    """``order_<id>_<client>_<YYYY-MM-DD>.pdf`` with a filesystem-safe client name."""
    client_name = order.client.name if order.client else 'internal'
    safe_name = re.sub(r'[^a-zA-Z0-9]', '_', client_name)
    created = timezone.localtime(order.created_at).strftime('%Y-%m-%d')
    return f'order_{order.id}_{safe_name}_{created}.pdf'


def _header(order, styles, title):
    story = [
        Paragraph(f'<b>{escape(settings.SHOP_NAME)}</b>', styles['Title']),
        Paragraph(f'{title} #{order.id}', styles['Heading2']),
        Paragraph(f'Created: {_local(order.created_at)}', styles['Normal']),
        Paragraph(f'Delivery: {_local(order.delivery_date)}', styles['Normal']),
        Paragraph(f'Status: {order.get_status_display()}', styles['Normal']),
    ]
    if order.client:
        story.append(Paragraph(f'Client: {escape(order.client.name)}', styles['Normal']))
        if order.client.phone:
            story.append(Paragraph(f'Phone: {escape(order.client.phone)}', styles['Normal']))
        if order.client.address:
            story.append(Paragraph(f'Address: {escape(order.client.address)}', styles['Normal']))
    story.append(Spacer(1, 12))
    return story


def _observations(order, styles):
    if not order.observations:
        return []
    return [
        Spacer(1, 12),
        Paragraph('<b>Observations</b>', styles['Heading3']),
        Paragraph(escape(order.observations).replace('\n', '<br/>'), styles['Normal']),
    ]


def _receipt_story(order, styles):
    story = _header(order, styles, 'Order')
    rows = [['Product', 'Qty', 'Unit price', 'Subtotal']]
    for item in order.items.all():
        rows.append([
            item.product.name,
            str(item.quantity),
            format_money(item.price),
            format_money(item.subtotal),
        ])
    rows.append(['', '', 'Total', format_money(order.total)])
    story.append(data_table(rows, col_widths=[250, 50, 100, 100]))
    story += _observations(order, styles)
    return story


def _kitchen_story(order, styles):
    story = _header(order, styles, 'Kitchen ticket')
    rows = [['Qty', 'Product']]
    for item in order.items.all():
        rows.append([str(item.quantity), item.product.name])
    story.append(data_table(rows, col_widths=[60, 400]))
    story += _observations(order, styles)
    return story


def render_order_pdf(order, document_type=RECEIPT):
    """
    Render an order document to PDF bytes.

    Args:
        order (Order): Order with items and client loaded.
        document_type (str): ``'receipt'`` (with prices) or ``'kitchen'`` (without).

    Raises:
        ValueError: If document_type is unknown.
    """
    if document_type not in DOCUMENT_TYPES:
        raise ValueError(f"Unknown document type: {document_type}")

    styles = get_styles()
    if document_type == KITCHEN:
        story = _kitchen_story(order, styles)
    else:
        story = _receipt_story(order, styles)
    return render_pdf(story, title=f'Order {order.id}')
