"""
Main URL Configuration
"""
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    # Django Admin
    path("admin/", admin.site.urls),

    # ==========================================
    # APP ROUTES
    # ==========================================
    path("api/users/", include("members.urls")),
]
