"""Serializers for parsing requests and rendering domain models.

Field names are camelCase on the wire; `source` maps them onto the
snake_case attributes of the Event domain model.
"""

from rest_framework import serializers

DATE_INPUT_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField(read_only=True)
    title = serializers.CharField(read_only=True)
    startTime = serializers.DateTimeField(source="start_time", read_only=True)
    endTime = serializers.DateTimeField(source="end_time", read_only=True)
    tags = serializers.ListField(child=serializers.CharField(), read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)


class EventCreateSerializer(serializers.Serializer):
    """Input for POST /api/events. Title and both times are required."""

    title = serializers.CharField(trim_whitespace=False)
    startTime = serializers.DateTimeField(source="start_time")
    endTime = serializers.DateTimeField(source="end_time")
    tags = serializers.ListField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=False),
        required=False,
        allow_null=True,
    )


class EventUpdateSerializer(serializers.Serializer):
    """Input for PUT/PATCH /api/events/{id}. Omitted fields stay unchanged."""

    title = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    startTime = serializers.DateTimeField(source="start_time", required=False)
    endTime = serializers.DateTimeField(source="end_time", required=False)
    tags = serializers.ListField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=False),
        required=False,
        allow_null=True,
    )


class EventListQuerySerializer(serializers.Serializer):
    """Query parameters accepted by GET /api/events."""

    date = serializers.DateField(required=False, input_formats=["%Y-%m-%d"])
    tag = serializers.CharField(required=False, allow_blank=True)
    limit = serializers.IntegerField(required=False, min_value=1)


class EventDateSerializer(serializers.Serializer):
    """Path parameter of GET /api/events/date/{date}."""

    date = serializers.DateField(input_formats=DATE_INPUT_FORMATS)
