from django.urls import include, path
from rest_framework.routers import DefaultRouter

from hifz.views import UserViewSet

router = DefaultRouter(trailing_slash=False)
router.register("users", UserViewSet, basename="user")

urlpatterns = [
    path("api/", include(router.urls)),
    path("api/", include("revision.api.urls")),
]
