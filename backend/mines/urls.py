from django.urls import path
from . import views

urlpatterns = [
    path('bet/', views.place_bet, name='mines_place_bet'),
    path('loss/', views.resolve_loss, name='mines_resolve_loss'),
    path('cashout/', views.cash_out, name='mines_cash_out'),
]
