from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    # Authentication
    path('register/', views.register, name='register'),
    path('login/', views.login, name='login'),

    # User profile
    path('profile/', views.profile, name='profile'),

    # Administration
    path('admin/users/', views.admin_users, name='admin-users'),
    path('admin/users/<uuid:user_id>/toggle/', views.toggle_user, name='toggle-user'),
]
