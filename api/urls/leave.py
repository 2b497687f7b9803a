from django.urls import path, include
from rest_framework.routers import DefaultRouter
from api.views.leave import LeaveViewSet

router = DefaultRouter()
# Trailing slash optional: /api/leaves and /api/leaves/ both resolve
router.trailing_slash = '/?'
router.register(r'leaves', LeaveViewSet, basename='leave')

urlpatterns = [
    path('', include(router.urls)),
]
