from django.urls import path, include
from api.views import LoginView

app_name = 'api'

urlpatterns = [
    # Custom login view (tokens + user data)
    path('auth/login/', LoginView.as_view(), name='login'),

    # Other dj-rest-auth endpoints (logout, user, token refresh/verify)
    path('auth/', include('dj_rest_auth.urls')),

    # User administration endpoints
    path('', include('api.urls.users')),

    # Leave endpoints
    path('', include('api.urls.leave')),
]
