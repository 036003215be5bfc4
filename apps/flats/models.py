# ==========================================
# apps/flats/models.py
# ==========================================

from django.db import models


class Flat(models.Model):
    """A unit of the apartment building, identified by its flat number."""

    flat_number = models.CharField(max_length=20, unique=True, db_index=True)
    connected_flats = models.ManyToManyField(
        'self',
        through='FlatLink',
        through_fields=('from_flat', 'to_flat'),
        symmetrical=True,
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'flats'
        ordering = ['flat_number']

    def __str__(self):
        return self.flat_number

    def save(self, *args, **kwargs):
        self.flat_number = (self.flat_number or '').strip()
        super().save(*args, **kwargs)

    def connected_flat_numbers(self):
        """Direct links in the order they were made."""
        return list(
            FlatLink.objects
            .filter(from_flat=self)
            .order_by('id')
            .values_list('to_flat__flat_number', flat=True)
        )

    def get_active_resident(self):
        return self.residents.filter(is_active=True).first()


class FlatLink(models.Model):
    """
    One direction of a link between two flats.

    Rows are written in pairs by the symmetrical ``connected_flats``
    relation, so a link from A to B always has its B to A counterpart.
    """

    from_flat = models.ForeignKey(Flat, on_delete=models.CASCADE, related_name='outgoing_links')
    to_flat = models.ForeignKey(Flat, on_delete=models.CASCADE, related_name='incoming_links')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'flat_links'
        unique_together = [['from_flat', 'to_flat']]
        ordering = ['id']

    def __str__(self):
        return f"{self.from_flat.flat_number} -> {self.to_flat.flat_number}"
