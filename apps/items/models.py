from django.db import models
from django.utils import timezone


class Item(models.Model):
    """
    Something the user did not buy (positive price: money saved)
    or gave in to (negative price: a lapse).
    """

    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='items'
    )
    name = models.CharField(max_length=100)
    price = models.IntegerField()
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'items'
        indexes = [
            models.Index(fields=['user', 'created_at'], name='items_user_id_3b1c6e_idx'),
            models.Index(fields=['created_at'], name='items_created_9d2e41_idx'),
        ]
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.name} ({self.price:+,} KRW)"

    @property
    def is_lapse(self):
        return self.price < 0
