import json
from django.core.management.base import BaseCommand, CommandError
from django.db.models import Count, Sum

from engine.wallet import get_account, recent_transactions
from wallets.models import GameTransaction


class Command(BaseCommand):
    help = 'Inspect an account balance and its game transaction ledger'

    def add_arguments(self, parser):
        parser.add_argument('user_id', type=str, help='Account user id')
        parser.add_argument(
            '--limit',
            type=int,
            default=20,
            help='Number of transactions to show (default: 20)'
        )
        parser.add_argument(
            '--tx-type',
            type=str,
            choices=[c[0] for c in GameTransaction.TX_TYPE_CHOICES] + ['all'],
            default='all',
            help='Filter by transaction type'
        )

    def handle(self, *args, **options):
        user_id = options['user_id']
        limit = options['limit']
        tx_type = options['tx_type']

        account = get_account(user_id)
        if account is None:
            raise CommandError(f'No account for user {user_id}')

        self.stdout.write(self.style.SUCCESS(f'Account: {account.user_id}'))
        self.stdout.write(f'Balance: {account.balance}')
        self.stdout.write(f'Updated: {account.updated_at}')
        self.stdout.write('=' * 80)

        txs = recent_transactions(user_id, limit=limit, tx_type=None if tx_type == 'all' else tx_type)
        if not txs:
            self.stdout.write(self.style.WARNING('No transactions found'))
        for i, tx in enumerate(txs, 1):
            self.stdout.write(
                f'#{i} [{tx.created_at}] {tx.game} {tx.tx_type} {tx.amount} '
                f'{json.dumps(tx.details, default=str)}'
            )

        self.stdout.write('\n' + '=' * 80)
        self.stdout.write(self.style.SUCCESS('Totals by type:'))

        totals = (
            GameTransaction.objects.filter(user_id=user_id)
            .values('tx_type')
            .annotate(count=Count('id'), total=Sum('amount'))
            .order_by('tx_type')
        )
        for row in totals:
            self.stdout.write(f"  {row['tx_type']}: {row['count']} records, {row['total']}")
