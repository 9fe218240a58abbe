from django.urls import path
from . import views

app_name = 'rankings'

urlpatterns = [
    path('rankings/', views.rankings, name='rankings'),
    path('hall-of-fame/', views.hall_of_fame, name='hall-of-fame'),
]
