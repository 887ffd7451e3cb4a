from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'expenses'

router = DefaultRouter()
router.register(r'', views.ExpenseViewSet, basename='expense')

urlpatterns = [
    # GET    /api/expenses/               - List expenses (newest first)
    # POST   /api/expenses/               - Record expense
    # GET    /api/expenses/{id}/          - Get expense
    # PUT    /api/expenses/{id}/          - Update expense
    # PATCH  /api/expenses/{id}/          - Partial update
    # DELETE /api/expenses/{id}/          - Delete expense
    # DELETE /api/expenses/delete-all/    - Remove all expenses
    path('', include(router.urls)),
]
