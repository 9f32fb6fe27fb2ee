from django.contrib import admin
from .models import Account, GameTransaction


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = ("user_id", "balance", "updated_at")
    search_fields = ("user_id",)
    readonly_fields = ("updated_at",)


@admin.register(GameTransaction)
class GameTransactionAdmin(admin.ModelAdmin):
    list_display = ("id", "user_id", "game", "tx_type", "amount", "created_at")
    list_filter = ("game", "tx_type")
    search_fields = ("user_id",)
    readonly_fields = ("user_id", "game", "tx_type", "amount", "details", "created_at")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
