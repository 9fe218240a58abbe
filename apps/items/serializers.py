from rest_framework import serializers
from .models import Item


PERIOD_CHOICES = ['today', 'day', 'week', 'month', 'all']


class ItemSerializer(serializers.ModelSerializer):
    """Serializer for logged items."""

    class Meta:
        model = Item
        fields = ['id', 'user', 'name', 'price', 'created_at']
        read_only_fields = ['id', 'user', 'created_at']


class ItemCreateSerializer(serializers.ModelSerializer):
    """Serializer for logging a new item."""

    name = serializers.CharField(max_length=100, trim_whitespace=True)
    price = serializers.IntegerField(min_value=-100_000_000, max_value=100_000_000)

    class Meta:
        model = Item
        fields = ['name', 'price']

    def validate_price(self, value):
        if value == 0:
            raise serializers.ValidationError('Price cannot be zero')
        return value


class ItemPeriodQuerySerializer(serializers.Serializer):
    """Validate the optional ?period= filter."""

    period = serializers.ChoiceField(choices=PERIOD_CHOICES, required=False)


class ItemSummarySerializer(serializers.Serializer):
    """Total saved in a period."""

    period = serializers.CharField()
    total = serializers.IntegerField()
    count = serializers.IntegerField()
