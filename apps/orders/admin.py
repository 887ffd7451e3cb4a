from django.contrib import admin
from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ['product', 'quantity', 'price']
    can_delete = False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ['id', 'client', 'total', 'status', 'delivery_date', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['id', 'client__name', 'observations']
    date_hierarchy = 'created_at'
    readonly_fields = ['total', 'user', 'created_at', 'updated_at']
    inlines = [OrderItemInline]

    def get_queryset(self, request):
        """Optimize query."""
        return super().get_queryset(request).select_related('client', 'user')
