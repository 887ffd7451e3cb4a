from django.urls import path
from . import views

app_name = 'search'

urlpatterns = [
    # GET /api/search/?q=   - Global search
    path('', views.search, name='search'),
]
