from django.contrib import admin
from .models import MonthlyReport


@admin.register(MonthlyReport)
class MonthlyReportAdmin(admin.ModelAdmin):
    list_display = ['month', 'year', 'total_revenue', 'total_expenses', 'net_profit', 'created_at']
    list_filter = ['year']
    exclude = ['pdf_data']
    readonly_fields = ['month', 'year', 'total_revenue', 'total_expenses', 'net_profit', 'created_at']
