from django.urls import path, include
from rest_framework.routers import DefaultRouter
from api.views.users import UserViewSet

router = DefaultRouter()
# Trailing slash optional: /api/users and /api/users/ both resolve
router.trailing_slash = '/?'
router.register(r'users', UserViewSet, basename='user')

urlpatterns = [
    path('', include(router.urls)),
]
