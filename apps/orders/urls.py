from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'orders'

router = DefaultRouter()
router.register(r'', views.OrderViewSet, basename='order')

urlpatterns = [
    # GET    /api/orders/               - List orders (newest first)
    # POST   /api/orders/               - Create order
    # GET    /api/orders/{id}/          - Get order
    # PATCH  /api/orders/{id}/          - Update status / client / delivery / observations
    # DELETE /api/orders/{id}/          - Delete order and items
    # GET    /api/orders/{id}/pdf/      - Receipt or kitchen ticket PDF
    # DELETE /api/orders/delete-all/    - Remove all orders
    path('', include(router.urls)),
]
