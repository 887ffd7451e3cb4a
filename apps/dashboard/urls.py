from django.urls import path
from . import views

app_name = 'dashboard'

urlpatterns = [
    # GET /api/dashboard/stats/   - Dashboard statistics
    path('stats/', views.dashboard_stats, name='stats'),
]
