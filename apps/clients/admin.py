from django.contrib import admin
from .models import Client


@admin.register(Client)
class ClientAdmin(admin.ModelAdmin):
    list_display = ['name', 'phone', 'birthday', 'created_at']
    search_fields = ['name', 'phone', 'address']
    ordering = ['name']
