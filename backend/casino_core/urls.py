from django.contrib import admin
from django.urls import path, include


urlpatterns = [
    path('admin-panel/', admin.site.urls),

    # Ledger
    path('api/wallet/', include('wallets.urls')),

    # Casino Games
    path('api/mines/', include('mines.urls')),
]
