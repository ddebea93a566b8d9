from django.conf import settings
from rest_framework import serializers

from .models import MemberProfile, Photo
from .pagination import MemberPagination


def members_config(key):
    return settings.MEMBERS_CONFIG[key]


class PhotoSerializer(serializers.ModelSerializer):
    class Meta:
        model = Photo
        fields = ['id', 'url', 'is_main']
        read_only_fields = fields


class MemberSerializer(serializers.ModelSerializer):
    # Read-only fields resolved from the linked User and photo collection
    id = serializers.IntegerField(source='user.id', read_only=True)
    username = serializers.CharField(source='user.username', read_only=True)
    photo_url = serializers.SerializerMethodField()
    age = serializers.IntegerField(read_only=True, allow_null=True)
    photos = PhotoSerializer(many=True, read_only=True)

    class Meta:
        model = MemberProfile
        fields = [
            'id',
            'username',
            'photo_url',
            'age',
            'known_as',
            'created',
            'last_active',
            'gender',
            'introduction',
            'looking_for',
            'interests',
            'city',
            'country',
            'photos',
        ]
        read_only_fields = fields

    def get_photo_url(self, obj: MemberProfile) -> str | None:
        main = obj.main_photo
        return main.url if main else None


class MemberUpdateSerializer(serializers.ModelSerializer):
    """
    Maps an incoming update onto a MemberProfile.

    ``save()`` only copies the validated fields onto the instance; persisting
    the change is left to the unit of work that loaded it.
    """

    class Meta:
        model = MemberProfile
        fields = [
            'introduction',
            'looking_for',
            'interests',
            'city',
            'country',
        ]
        extra_kwargs = {field: {'required': False} for field in fields}

    def update(self, instance, validated_data):
        for field, value in validated_data.items():
            setattr(instance, field, value)
        return instance


class MemberParamsSerializer(serializers.Serializer):
    """Query parameters accepted by the member listing."""

    ORDER_CHOICES = ['last_active', 'created']

    page_number = serializers.IntegerField(required=False, min_value=1, default=1)
    page_size = serializers.IntegerField(required=False, min_value=1)
    gender = serializers.CharField(required=False, allow_blank=True, default='')
    min_age = serializers.IntegerField(required=False, min_value=0)
    max_age = serializers.IntegerField(required=False, min_value=0)
    order_by = serializers.ChoiceField(choices=ORDER_CHOICES, required=False, default='last_active')

    def validate_page_size(self, value):
        """Clamp to the configured maximum instead of rejecting"""
        return min(value, MemberPagination.max_page_size)

    def validate(self, attrs):
        attrs.setdefault('page_size', MemberPagination.page_size)
        attrs.setdefault('min_age', members_config('DEFAULT_MIN_AGE'))
        attrs.setdefault('max_age', members_config('DEFAULT_MAX_AGE'))

        if attrs['min_age'] > attrs['max_age']:
            raise serializers.ValidationError("min_age cannot be greater than max_age")
        return attrs
