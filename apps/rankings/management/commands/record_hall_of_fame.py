"""
Management command to record hall of fame winners.

Saves the winners of the last completed week and month. Safe to run
repeatedly: a period that already has a winner is left untouched.

Usage:
    python manage.py record_hall_of_fame
    python manage.py record_hall_of_fame --date 2025-03-12
"""

from datetime import date, datetime, time

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from apps.rankings.hall_of_fame import record_completed_periods


class Command(BaseCommand):
    help = 'Record hall of fame winners for the last completed week and month'

    def add_arguments(self, parser):
        parser.add_argument(
            '--date',
            help='Treat this local date (YYYY-MM-DD) as today',
        )

    def handle(self, *args, **options):
        now = None
        if options['date']:
            try:
                today = date.fromisoformat(options['date'])
            except ValueError:
                raise CommandError(f"Invalid date: {options['date']}. Use YYYY-MM-DD.")
            now = timezone.make_aware(datetime.combine(today, time(12, 0)))

        created = record_completed_periods(now=now)

        if not created:
            self.stdout.write(
                self.style.SUCCESS('Nothing to record. Hall of fame is up to date.')
            )
            return

        for entry in created:
            self.stdout.write(
                f'  - {entry.period_type} {entry.period_start} ~ {entry.period_end}: '
                f'{entry.user_name} ({entry.total_amount:,} KRW)'
            )

        self.stdout.write(
            self.style.SUCCESS(f'\nRecorded {len(created)} hall of fame entr{"y" if len(created) == 1 else "ies"}.')
        )
