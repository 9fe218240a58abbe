from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .hall_of_fame import record_completed_periods, list_hall_of_fame
from .rankings import RankingQueries
from .serializers import (
    RankingQuerySerializer,
    HallOfFameQuerySerializer,
    RankingEntrySerializer,
    HallOfFameEntrySerializer,
)


@extend_schema(
    parameters=[
        OpenApiParameter(
            'period',
            OpenApiTypes.STR,
            description="'day', 'week', 'month' or 'all' (default: week)"
        ),
    ],
    responses={200: RankingEntrySerializer(many=True)},
    description="Top 100 users by total saved in the current period.",
    tags=['rankings'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def rankings(request):
    """Global leaderboard - thin HTTP handler."""
    query_serializer = RankingQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    data = RankingQueries.global_rankings(
        period=query_serializer.validated_data['period']
    )
    return Response(RankingEntrySerializer(data, many=True).data)


@extend_schema(
    parameters=[
        OpenApiParameter('period_type', OpenApiTypes.STR, description="'week' or 'month'"),
    ],
    responses={200: HallOfFameEntrySerializer(many=True)},
    description="Winners of completed weeks and months, newest first.",
    tags=['rankings'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def hall_of_fame(request):
    """Hall of fame - records any finished period before listing."""
    query_serializer = HallOfFameQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    record_completed_periods()

    entries = list_hall_of_fame(
        period_type=query_serializer.validated_data.get('period_type')
    )
    return Response(HallOfFameEntrySerializer(entries, many=True).data)
