from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from decimal import Decimal
import calendar


class PaymentMode(models.TextChoices):
    UPI = 'upi', 'UPI'
    CASH = 'cash', 'Cash'
    BANK_TRANSFER = 'bank_transfer', 'Bank Transfer'
    CHEQUE = 'cheque', 'Cheque'
    OTHER = 'other', 'Other'


class Payment(models.Model):
    """Maintenance payment of a flat for one billing month."""

    flat = models.ForeignKey(
        'flats.Flat',
        to_field='flat_number',
        on_delete=models.CASCADE,
        related_name='payments'
    )
    month = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(12)]
    )
    year = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(2000), MaxValueValidator(2100)]
    )
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    paid_on = models.DateField()
    payment_mode = models.CharField(
        max_length=20,
        choices=PaymentMode.choices,
        default=PaymentMode.UPI
    )
    note = models.TextField(blank=True)

    recorded_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='recorded_payments'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'payments'
        unique_together = [['flat', 'month', 'year']]
        indexes = [
            models.Index(fields=['year', 'month'], name='payments_period_idx'),
            models.Index(fields=['flat', 'year', 'month'], name='payments_flat_period_idx'),
        ]
        ordering = ['-paid_on', '-created_at']

    def __str__(self):
        return f"{self.flat_id} - {self.period_label} ({self.amount})"

    @property
    def period_label(self):
        return f"{calendar.month_name[self.month]} {self.year}"
