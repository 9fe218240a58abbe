from rest_framework import mixins, viewsets, status
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from django.shortcuts import get_object_or_404
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.models import User
from .models import Item
from .serializers import (
    ItemSerializer,
    ItemCreateSerializer,
    ItemPeriodQuerySerializer,
    ItemSummarySerializer,
)
from .services import (
    add_item,
    delete_item,
    get_user_items,
    summarize_items,
    ItemNotFoundError,
)


PERIOD_PARAMETER = OpenApiParameter(
    'period',
    OpenApiTypes.STR,
    description="Limit to the current 'today', 'week' or 'month' (local time), or 'all'",
)


class ItemViewSet(mixins.ListModelMixin,
                  mixins.CreateModelMixin,
                  mixins.DestroyModelMixin,
                  viewsets.GenericViewSet):
    """
    ViewSet for the current user's items.

    list: Get own items, newest first (?period=today|week|month|all)
    create: Log an item (negative price for a lapse)
    destroy: Delete one of own items
    summary: Total and count for a period
    """

    serializer_class = ItemSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = r'\d+'

    def _period(self):
        query_serializer = ItemPeriodQuerySerializer(data=self.request.query_params)
        query_serializer.is_valid(raise_exception=True)
        return query_serializer.validated_data.get('period')

    def get_queryset(self):
        return get_user_items(user_id=self.request.user.id, period=self._period())

    def get_serializer_class(self):
        if self.action == 'create':
            return ItemCreateSerializer
        return ItemSerializer

    @extend_schema(parameters=[PERIOD_PARAMETER])
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(request=ItemCreateSerializer, responses={201: ItemSerializer})
    def create(self, request, *args, **kwargs):
        """Log a new item."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        item = add_item(user=request.user, **serializer.validated_data)

        return Response(ItemSerializer(item).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, *args, **kwargs):
        """Delete an item."""
        try:
            delete_item(item_id=self.kwargs['pk'], user=request.user)
        except ItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(parameters=[PERIOD_PARAMETER], responses={200: ItemSummarySerializer})
    @action(detail=False, methods=['get'])
    def summary(self, request):
        """Total saved and item count for the period."""
        data = summarize_items(user_id=request.user.id, period=self._period() or 'all')
        return Response(ItemSummarySerializer(data).data)


@extend_schema(
    parameters=[PERIOD_PARAMETER],
    responses={200: ItemSerializer(many=True)},
    description="Get another user's items, newest first.",
    tags=['items'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def user_items(request, user_id):
    """List a user's items."""
    get_object_or_404(User, id=user_id, is_active=True)

    query_serializer = ItemPeriodQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    items = get_user_items(
        user_id=user_id,
        period=query_serializer.validated_data.get('period')
    )
    return Response(ItemSerializer(items, many=True).data)
