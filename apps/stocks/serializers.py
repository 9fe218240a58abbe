from rest_framework import serializers


class StockQuerySerializer(serializers.Serializer):
    """Validate ?amount= (KRW saved)."""

    amount = serializers.IntegerField(min_value=0, required=False)


class StockQuoteSerializer(serializers.Serializer):
    symbol = serializers.CharField()
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=18, decimal_places=4, coerce_to_string=False)
    currency = serializers.CharField()
    shares = serializers.DecimalField(
        max_digits=18,
        decimal_places=2,
        coerce_to_string=False,
        required=False
    )
