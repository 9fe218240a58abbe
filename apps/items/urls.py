from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'items'

router = DefaultRouter()
router.register(r'', views.ItemViewSet, basename='item')

urlpatterns = [
    # Item ViewSet routes
    # GET    /api/items/            - List own items (?period=)
    # POST   /api/items/            - Log an item
    # DELETE /api/items/{id}/       - Delete own item
    # GET    /api/items/summary/    - Total for a period

    path('user/<uuid:user_id>/', views.user_items, name='user-items'),

    path('', include(router.urls)),
]
