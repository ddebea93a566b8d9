# ============================================
# members/urls.py
# ============================================
from django.urls import path
from . import views

app_name = 'members'

urlpatterns = [
    # List members / update own profile
    path('', views.UserListView.as_view(), name='users'),

    # Photo management (declared before the username route)
    path('add-photo/', views.AddPhotoView.as_view(), name='add-photo'),
    path('set-main-photo/<int:photo_id>/', views.SetMainPhotoView.as_view(), name='set-main-photo'),
    path('delete-photo/<int:photo_id>/', views.DeletePhotoView.as_view(), name='delete-photo'),

    # Single member
    path('<str:username>/', views.UserDetailView.as_view(), name='get-user'),
]
