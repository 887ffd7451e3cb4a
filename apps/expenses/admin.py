from django.contrib import admin
from .models import Expense


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    list_display = ['description', 'amount', 'category', 'date', 'user']
    list_filter = ['category', 'date']
    search_fields = ['description', 'category']
    date_hierarchy = 'date'
    readonly_fields = ['created_at']
