from django.db import models
from django.utils import timezone


class Expense(models.Model):
    """Money spent by the shop (ingredients, packaging, rent...)."""

    description = models.CharField(max_length=255)
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    category = models.CharField(max_length=100, blank=True)
    date = models.DateField(default=timezone.localdate, db_index=True)

    # Staff member who recorded the expense
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='expenses'
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'expenses'
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.description} - {self.amount} ({self.date})"
