"""
Serializers for rankings app.

Input Serializers:
    RankingQuerySerializer - ?period= for the global board
    HallOfFameQuerySerializer - ?period_type= for the hall of fame

Response Serializers:
    RankingEntrySerializer - One row of the global board
    GroupRankingEntrySerializer - One row of a group's weekly board
    HallOfFameEntrySerializer - One recorded winner
"""

from rest_framework import serializers

from .models import HallOfFameEntry, HallOfFamePeriod
from .periods import RANKING_PERIODS, WEEK


class RankingQuerySerializer(serializers.Serializer):
    """Validate ?period=, defaulting to this week."""

    period = serializers.ChoiceField(
        choices=list(RANKING_PERIODS) + ['today'],
        required=False,
        default=WEEK
    )


class HallOfFameQuerySerializer(serializers.Serializer):
    period_type = serializers.ChoiceField(
        choices=HallOfFamePeriod.choices,
        required=False
    )


class RankingEntrySerializer(serializers.Serializer):
    rank = serializers.IntegerField()
    id = serializers.UUIDField()
    username = serializers.CharField()
    name = serializers.CharField()
    total = serializers.IntegerField()
    item_count = serializers.IntegerField()


class GroupRankingEntrySerializer(serializers.Serializer):
    rank = serializers.IntegerField()
    id = serializers.UUIDField()
    username = serializers.CharField()
    name = serializers.CharField()
    weekly_total = serializers.IntegerField()
    joined_at = serializers.DateTimeField()


class HallOfFameEntrySerializer(serializers.ModelSerializer):
    user_id = serializers.UUIDField(read_only=True, allow_null=True)

    class Meta:
        model = HallOfFameEntry
        fields = [
            'id', 'period_type', 'period_start', 'period_end',
            'user_id', 'user_name', 'total_amount', 'created_at'
        ]
        read_only_fields = fields
