"""
Management command to seed the database with sample data.

Usage:
    python manage.py seed_data [--clear]

This creates:
- 8 flats (101-103, 201-203, 301-302), placed into groups by the
  placement heuristic as they are created
- 1 admin (admin / admin123)
- 3 residents for flats 101-103 (password123)
- Sample payments for the current and previous month
"""

from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User, UserRole
from apps.flats.models import Flat, FlatLink
from apps.flats.services import create_flat, find_all_groups, load_adjacency
from apps.payments.models import Payment, PaymentMode

FLAT_NUMBERS = ['101', '102', '103', '201', '202', '203', '301', '302']

RESIDENTS = [
    {'username': 'rajesh101', 'email': 'rajesh@example.com', 'flat': '101', 'contact': '9876512345'},
    {'username': 'priya102', 'email': 'priya@example.com', 'flat': '102', 'contact': '9876523456'},
    {'username': 'amit103', 'email': 'amit@example.com', 'flat': '103', 'contact': '9876534567'},
]

MAINTENANCE_AMOUNT = Decimal('1500.00')


class Command(BaseCommand):
    help = 'Seed the database with sample flats, users and payments'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        self.create_flats()
        admin = self.create_users()
        self.create_payments(admin)

        self.stdout.write(self.style.SUCCESS('Database seeded successfully!'))
        self.stdout.write('')
        self.stdout.write('Groups:')
        for index, group in enumerate(find_all_groups(load_adjacency()), start=1):
            self.stdout.write(f'  Group {index}: {", ".join(group)}')
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin / admin123 (admin)')
        self.stdout.write('  rajesh101 / password123 (flat 101)')

    def clear_data(self):
        """Clear all data from the database."""
        Payment.objects.all().delete()
        User.objects.all().delete()
        FlatLink.objects.all().delete()
        Flat.objects.all().delete()

    def create_flats(self):
        for flat_number in FLAT_NUMBERS:
            if Flat.objects.filter(flat_number=flat_number).exists():
                continue
            create_flat(flat_number=flat_number)
        self.stdout.write(f'  Flats: {Flat.objects.count()}')

    def create_users(self):
        admin = User.objects.filter(username='admin').first()
        if admin is None:
            admin = User.objects.create_user(
                username='admin',
                email='admin@maintenance.com',
                password='admin123',
                role=UserRole.ADMIN,
                is_staff=True,
                contact='9876500000',
            )

        for data in RESIDENTS:
            if User.objects.filter(username=data['username']).exists():
                continue
            User.objects.create_user(
                username=data['username'],
                email=data['email'],
                password='password123',
                role=UserRole.USER,
                flat_id=data['flat'],
                contact=data['contact'],
            )

        self.stdout.write(f'  Users: {User.objects.count()}')
        return admin

    def create_payments(self, admin):
        today = timezone.localdate()
        previous = today.replace(day=1) - timedelta(days=1)

        payments = [
            ('101', today, PaymentMode.UPI),
            ('102', today, PaymentMode.BANK_TRANSFER),
            ('101', previous, PaymentMode.CASH),
            ('201', previous, PaymentMode.UPI),
        ]
        for flat_number, period, mode in payments:
            Payment.objects.get_or_create(
                flat_id=flat_number,
                month=period.month,
                year=period.year,
                defaults={
                    'amount': MAINTENANCE_AMOUNT,
                    'paid_on': period,
                    'payment_mode': mode,
                    'recorded_by': admin,
                },
            )

        self.stdout.write(f'  Payments: {Payment.objects.count()}')
