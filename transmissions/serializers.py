from rest_framework import serializers
from transmissions.models import Report


class ReportSerializer(serializers.ModelSerializer):
    """Serializer for a visible report with its handle inlined."""
    handle = serializers.CharField(source="handle.display", read_only=True)
    handle_id = serializers.UUIDField(read_only=True)
    platform = serializers.CharField(source="handle.platform", read_only=True, allow_null=True)
    severity_label = serializers.CharField(source="get_severity_display", read_only=True)

    class Meta:
        model = Report
        fields = [
            "id",
            "handle_id",
            "handle",
            "platform",
            "sentiment",
            "severity",
            "severity_label",
            "encounter",
            "category",
            "description",
            "created_at",
        ]


class ReportSubmissionSerializer(serializers.Serializer):
    """Input shape for submitting a report; choice checks run in ReportingService."""
    handle = serializers.CharField(max_length=100)
    platform = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    sentiment = serializers.CharField(required=False, default="neutral")
    severity = serializers.CharField(required=False, default="info")
    encounter = serializers.CharField(required=False, default="other")
    category = serializers.CharField(max_length=64, required=False, allow_blank=True, default=Report.DEFAULT_CATEGORY)
    description = serializers.CharField(max_length=4000, allow_blank=True)


class DisputeSerializer(serializers.Serializer):
    message = serializers.CharField(max_length=2000, allow_blank=True)


class LeaderRowSerializer(serializers.Serializer):
    handle_id = serializers.CharField()
    handle = serializers.CharField()
    platform = serializers.CharField(allow_null=True)
    value = serializers.IntegerField()


class LeaderboardsSerializer(serializers.Serializer):
    most_reported_all_time = LeaderRowSerializer(many=True)
    most_7d = LeaderRowSerializer(many=True)
    most_24h = LeaderRowSerializer(many=True)
    nicest = LeaderRowSerializer(many=True)
