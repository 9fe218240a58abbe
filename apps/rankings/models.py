from django.db import models


class HallOfFamePeriod(models.TextChoices):
    WEEK = 'week', 'Week'
    MONTH = 'month', 'Month'


class HallOfFameEntry(models.Model):
    """Top saver of a completed week or month, written once per period."""

    period_type = models.CharField(max_length=10, choices=HallOfFamePeriod.choices)
    period_start = models.DateField()
    period_end = models.DateField()
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        related_name='hall_of_fame_entries'
    )
    # Snapshot, so renamed or deleted users keep their place
    user_name = models.CharField(max_length=150)
    total_amount = models.IntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'hall_of_fame'
        constraints = [
            models.UniqueConstraint(
                fields=['period_type', 'period_start'],
                name='unique_hall_of_fame_period'
            ),
        ]
        ordering = ['-period_start', 'period_type']
        verbose_name_plural = 'hall of fame entries'

    def __str__(self):
        return f"{self.period_type} {self.period_start}: {self.user_name} ({self.total_amount:,} KRW)"
