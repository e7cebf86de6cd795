from django.urls import path, include
from rest_framework.routers import DefaultRouter

from apps.beers.api.v1.views import BeerViewSet

router = DefaultRouter()
router.register(r'beers', BeerViewSet, basename='beer')

urlpatterns = [
    path('', include(router.urls)),
]
