"""
Order Services Module
=====================

Business logic for orders: total computation with price snapshots, atomic
creation and deletion of an order together with its items, and status /
detail updates.

Functions:
    create_order: Validate items and client, compute the total, persist atomically.
    get_order: Fetch one order with client, user and items loaded.
    list_orders: Newest-first queryset with optional filters.
    update_order: Change status, client, delivery date or observations.
    delete_order: Remove an order and its items in one transaction.
    delete_all_orders: Remove every order and item in one transaction.

Example:
    Taking an order::

        from apps.orders.services import create_order

        order = create_order(
            user=request.user,
            items=[
                {'product_id': cake.id, 'quantity': 1},
                {'product_id': brigadeiro.id, 'quantity': 50},
            ],
            client_id=client.id,
            delivery_date=saturday_afternoon,
        )
        print(order.total)  # 80.00 + 50 * 2.50 = 205.00

Note:
    Each OrderItem keeps the product price read when the order was created.
    Changing a product price later never touches existing orders.
"""

import logging
from decimal import Decimal

from django.db import transaction

from apps.clients.models import Client
from apps.products.models import Product
from .exceptions import (
    OrderNotFoundError,
    ProductNotFoundError,
    ClientNotFoundError,
    InvalidOrderError,
)
from .models import Order, OrderItem, OrderStatus

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ('status', 'client_id', 'delivery_date', 'observations')

# Order.total is DecimalField(max_digits=12, decimal_places=2).
MAX_TOTAL = Decimal('9999999999.99')


def _base_queryset():
    return (
        Order.objects
        .select_related('client', 'user')
        .prefetch_related('items__product')
    )


def get_order(order_id):
    """
    Fetch an order with client, user and items (with products) loaded.

    Raises:
        OrderNotFoundError: If no order has this id.
    """
    try:
        return _base_queryset().get(id=order_id)
    except Order.DoesNotExist:
        raise OrderNotFoundError(f"Order {order_id} not found")


def list_orders(*, status=None, client_id=None, date_from=None, date_to=None):
    """Return orders newest first, optionally filtered."""
    queryset = _base_queryset().order_by('-created_at')

    if status:
        queryset = queryset.filter(status=status)
    if client_id:
        queryset = queryset.filter(client_id=client_id)
    if date_from:
        queryset = queryset.filter(created_at__date__gte=date_from)
    if date_to:
        queryset = queryset.filter(created_at__date__lte=date_to)

    return queryset


def _resolve_client(client_id):
    try:
        return Client.objects.get(id=client_id)
    except Client.DoesNotExist:
        raise ClientNotFoundError(f"Client {client_id} not found")


@transaction.atomic
def create_order(
    *,
    user,
    items,
    client_id=None,
    observations='',
    delivery_date=None
):
    """
    Create an order with its items and a total computed from current prices.

    All validation runs before the first write, and the order row plus its
    items are inserted in a single transaction: a failed call leaves no
    order and no items behind.

    Args:
        user (User): Staff member taking the order (stored as creator).
        items (list[dict]): Non-empty list of ``{'product_id', 'quantity'}``.
            The same product may appear more than once; each entry becomes
            its own line.
        client_id (int, optional): Existing client to attach.
        observations (str, optional): Free text for the kitchen / counter.
        delivery_date (datetime, optional): When the order must be ready.

    Returns:
        Order: The new order with items, client and user loaded.

    Raises:
        InvalidOrderError: If items is empty, a quantity is not positive or
            the total does not fit the total column.
        ProductNotFoundError: If any product id does not exist.
        ClientNotFoundError: If client_id is given and does not exist.
    """
    if not items:
        raise InvalidOrderError("An order needs at least one item")

    for item in items:
        if item['quantity'] < 1:
            raise InvalidOrderError("Item quantity must be at least 1")

    product_ids = {item['product_id'] for item in items}
    products = Product.objects.in_bulk(product_ids)
    missing = sorted(product_ids - set(products))
    if missing:
        raise ProductNotFoundError(missing)

    client = _resolve_client(client_id) if client_id is not None else None

    total = Decimal('0.00')
    lines = []
    for item in items:
        product = products[item['product_id']]
        total += product.price * item['quantity']
        lines.append((product, item['quantity'], product.price))

    if total > MAX_TOTAL:
        raise InvalidOrderError("Order total is too large")

    order = Order.objects.create(
        user=user,
        client=client,
        total=total,
        status=OrderStatus.PENDENTE,
        observations=observations or '',
        delivery_date=delivery_date,
    )
    OrderItem.objects.bulk_create([
        OrderItem(order=order, product=product, quantity=quantity, price=price)
        for product, quantity, price in lines
    ])

    logger.info(
        "Order %s created by %s: %d item(s), total %s",
        order.id, user.id, len(lines), total,
    )
    return _base_queryset().get(id=order.id)


@transaction.atomic
def update_order(*, order_id, changes):
    """
    Apply a partial update to an order.

    Only keys present in ``changes`` are touched. Status moves are not
    restricted: any status may follow any other. ``client_id`` may be
    ``None`` to detach the client. Items and total are never modified here.

    Args:
        order_id (int): Order to update.
        changes (dict): Subset of status, client_id, delivery_date, observations.

    Returns:
        Order: The updated order with relations loaded.

    Raises:
        OrderNotFoundError: If the order does not exist.
        ClientNotFoundError: If a new client_id does not exist.
        InvalidOrderError: If status is not a known value or a field is not updatable.
    """
    unknown = set(changes) - set(UPDATABLE_FIELDS)
    if unknown:
        raise InvalidOrderError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")

    try:
        order = Order.objects.select_for_update().get(id=order_id)
    except Order.DoesNotExist:
        raise OrderNotFoundError(f"Order {order_id} not found")

    if 'status' in changes:
        if changes['status'] not in OrderStatus.values:
            raise InvalidOrderError(f"Invalid status: {changes['status']}")
        order.status = changes['status']

    if 'client_id' in changes:
        client_id = changes['client_id']
        order.client = _resolve_client(client_id) if client_id is not None else None

    if 'delivery_date' in changes:
        order.delivery_date = changes['delivery_date']

    if 'observations' in changes:
        order.observations = changes['observations'] or ''

    order.save()
    logger.info("Order %s updated: %s", order.id, ', '.join(sorted(changes)) or 'no changes')
    return get_order(order.id)


@transaction.atomic
def delete_order(*, order_id):
    """
    Delete an order, removing its items before the order row.

    Raises:
        OrderNotFoundError: If the order does not exist.
    """
    try:
        order = Order.objects.get(id=order_id)
    except Order.DoesNotExist:
        raise OrderNotFoundError(f"Order {order_id} not found")

    OrderItem.objects.filter(order=order).delete()
    order.delete()
    logger.info("Order %s deleted", order_id)


@transaction.atomic
def delete_all_orders():
    """
    Delete every order and item.

    Returns:
        dict: ``{'orders': <deleted orders>, 'items': <deleted items>}``
    """
    items_deleted, _ = OrderItem.objects.all().delete()
    orders_deleted, _ = Order.objects.all().delete()
    logger.warning("Deleted all orders (%d orders, %d items)", orders_deleted, items_deleted)
    return {'orders': orders_deleted, 'items': items_deleted}
