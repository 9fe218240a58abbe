from rest_framework import serializers
from .models import Group
from apps.accounts.models import User
from apps.rankings.rankings import RankingQueries
from apps.rankings.serializers import GroupRankingEntrySerializer


class UserMinimalSerializer(serializers.ModelSerializer):
    """Minimal user info for nested serialization."""

    name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'username', 'name']
        read_only_fields = fields

    def get_name(self, obj):
        return obj.get_display_name()


class GroupSerializer(serializers.ModelSerializer):
    """Group with its invite code and member count."""

    owner = UserMinimalSerializer(read_only=True)
    member_count = serializers.SerializerMethodField()

    class Meta:
        model = Group
        fields = [
            'id',
            'name',
            'invite_code',
            'owner',
            'member_count',
            'created_at',
        ]
        read_only_fields = fields

    def get_member_count(self, obj):
        """Use the annotation when the queryset provides one."""
        count = getattr(obj, 'member_count', None)
        if count is None:
            count = obj.memberships.count()
        return count


class GroupDetailSerializer(GroupSerializer):
    """Group plus its members ranked by this week's total."""

    members = serializers.SerializerMethodField()

    class Meta(GroupSerializer.Meta):
        fields = GroupSerializer.Meta.fields + ['members']
        read_only_fields = fields

    def get_members(self, obj):
        rankings = RankingQueries.group_weekly_rankings(obj.id)
        return GroupRankingEntrySerializer(rankings, many=True).data


class GroupCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating groups."""

    name = serializers.CharField(max_length=50, trim_whitespace=True)

    class Meta:
        model = Group
        fields = ['name']


class JoinGroupSerializer(serializers.Serializer):
    """Serializer for joining a group with invite code."""

    invite_code = serializers.CharField(max_length=6, min_length=6, required=True)
