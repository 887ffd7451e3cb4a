from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from decimal import Decimal


class OrderStatus(models.TextChoices):
    """Production board columns. Any status may move to any other."""

    PENDENTE = 'PENDENTE', 'Pending'
    EM_PREPARO = 'EM_PREPARO', 'In preparation'
    PRONTO = 'PRONTO', 'Ready'
    CONCLUIDO = 'CONCLUÍDO', 'Completed'
    CANCELADO = 'CANCELADO', 'Cancelled'
    SINAL_PAGO = 'SINAL_PAGO', 'Deposit paid'


class Order(models.Model):
    """Customer or internal order; `total` is derived from its items at creation."""

    # Staff member who took the order
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='orders'
    )

    # Optional customer; orders survive client deletion
    client = models.ForeignKey(
        'clients.Client',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='orders'
    )

    total = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00')
    )
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDENTE
    )
    observations = models.TextField(blank=True)
    delivery_date = models.DateTimeField(null=True, blank=True)

    # Timestamps
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'orders'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status', 'created_at']),
            models.Index(fields=['delivery_date']),
        ]

    def __str__(self):
        client = self.client.name if self.client else 'Internal'
        return f"Order #{self.pk} - {client} ({self.status})"


class OrderItem(models.Model):
    """Order line. `price` is the product's unit price when the order was created."""

    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name='items'
    )
    product = models.ForeignKey(
        'products.Product',
        on_delete=models.PROTECT,
        related_name='order_items'
    )
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    price = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        db_table = 'order_items'
        ordering = ['id']

    def __str__(self):
        return f"{self.quantity} x {self.product.name} @ {self.price}"

    @property
    def subtotal(self):
        return self.price * self.quantity
