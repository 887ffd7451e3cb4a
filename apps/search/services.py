"""
Search Services Module
======================

Global search across clients, orders and products for the top search bar.

The three lookups are independent. Each one is evaluated in its own worker
thread (``sync_to_async(thread_sensitive=False)``), so each gets its own
database connection and the queries overlap. ``asyncio.gather`` joins them
before the caller gets one combined result.

Functions:
    global_search: Query all three categories and return their matches.

Example:
    ::

        from apps.search.services import global_search

        results = global_search('ana')
        results['clients']   # [Client(Ana Souza), ...]
        results['orders']    # orders whose client name contains "ana"
        results['products']  # [Product(Banana Bread), ...]
"""

import asyncio
import logging

from asgiref.sync import async_to_sync, sync_to_async
from django.db import connections
from django.db.models import Q

from apps.clients.models import Client
from apps.orders.models import Order
from apps.products.models import Product

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
RESULT_LIMIT = 5


def _empty_results():
    return {'clients': [], 'orders': [], 'products': []}


def _fetch(queryset):
    """Evaluate a queryset in a worker thread, then close that thread's connections."""
    try:
        return list(queryset)
    finally:
        connections.close_all()


def _run_concurrently(*querysets):
    async def gather():
        return await asyncio.gather(*(
            sync_to_async(_fetch, thread_sensitive=False)(queryset)
            for queryset in querysets
        ))
    return async_to_sync(gather)()


def _search(query):
    clients = Client.objects.filter(
        Q(name__icontains=query) | Q(phone__contains=query)
    ).order_by('name')[:RESULT_LIMIT]

    order_filter = Q(client__name__icontains=query)
    # ids are 64-bit integers
    if query.isdecimal() and int(query) < 2 ** 63:
        order_filter |= Q(id=int(query))
    orders = (
        Order.objects
        .filter(order_filter)
        .select_related('client')
        .order_by('-created_at')[:RESULT_LIMIT]
    )

    products = Product.objects.filter(name__icontains=query).order_by('name')[:RESULT_LIMIT]

    client_list, order_list, product_list = _run_concurrently(clients, orders, products)
    return {'clients': client_list, 'orders': order_list, 'products': product_list}


def global_search(query):
    """
    Search clients, orders and products.

    Args:
        query (str): Raw search text; surrounding whitespace is ignored.

    Returns:
        dict: ``clients``, ``orders`` and ``products`` lists with at most
        five entries each. Queries shorter than two characters return
        three empty lists without touching the database.

    Matching:
        - clients: name contains the query (case-insensitive) or phone contains it
        - orders: client name contains the query (case-insensitive), or the
          order id equals the query when it is all digits; newest first
        - products: name contains the query (case-insensitive)
    """
    query = (query or '').strip()
    if len(query) < MIN_QUERY_LENGTH:
        return _empty_results()

    results = _search(query)
    logger.debug(
        "Search %r: %d client(s), %d order(s), %d product(s)",
        query, len(results['clients']), len(results['orders']), len(results['products']),
    )
    return results
