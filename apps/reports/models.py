from decimal import Decimal
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class MonthlyReport(models.Model):
    """Closing snapshot for one calendar month, with its rendered PDF."""

    month = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(12)]
    )
    year = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(2000), MaxValueValidator(2100)]
    )
    total_revenue = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal('0.00'))
    total_expenses = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal('0.00'))
    net_profit = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal('0.00'))
    pdf_data = models.BinaryField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'monthly_reports'
        ordering = ['-year', '-month']
        constraints = [
            models.UniqueConstraint(
                fields=['month', 'year'],
                name='unique_report_per_period'
            ),
        ]

    def __str__(self):
        return f"Report {self.month:02d}/{self.year}"

    @property
    def download_filename(self):
        return f"monthly_report_{self.month}_{self.year}.pdf"
