"""
URL configuration for content_store project.

Only the admin is exposed; it is used to inspect imported content.
"""
from django.contrib import admin
from django.urls import path

urlpatterns = [
    path('admin/', admin.site.urls),
]
