from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .quotes import get_stock_quotes, shares_affordable
from .serializers import StockQuerySerializer, StockQuoteSerializer


@extend_schema(
    parameters=[
        OpenApiParameter('amount', OpenApiTypes.INT, description='Amount saved in KRW'),
    ],
    responses={200: StockQuoteSerializer(many=True)},
    description="Latest stock prices, and how many shares the amount would buy.",
    tags=['stocks'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def stock_list(request):
    """Stock quotes - thin HTTP handler."""
    query_serializer = StockQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    amount = query_serializer.validated_data.get('amount')

    quotes = []
    for quote in get_stock_quotes():
        quote = dict(quote)
        if amount is not None:
            quote['shares'] = shares_affordable(amount, quote)
        quotes.append(quote)

    return Response(StockQuoteSerializer(quotes, many=True).data)
