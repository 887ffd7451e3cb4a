from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'reports'

router = DefaultRouter()
router.register(r'', views.ReportViewSet, basename='report')

urlpatterns = [
    # GET  /api/reports/                 - Report history
    # POST /api/reports/                 - Generate report for {month, year}
    # GET  /api/reports/{id}/            - Report totals
    # GET  /api/reports/{id}/download/   - Report PDF
    path('', include(router.urls)),
]
