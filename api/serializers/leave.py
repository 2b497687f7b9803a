"""
Serializers for leave requests
"""
from rest_framework import serializers
from api.models import Leave, LeaveMeans


class LeaveSerializer(serializers.ModelSerializer):
    """Serializer for reading leave requests, all stored fields included"""

    means_display = serializers.CharField(source='get_means_display', read_only=True)
    status_display = serializers.CharField(source='get_status_display', read_only=True)
    duration_days = serializers.IntegerField(read_only=True)

    class Meta:
        model = Leave
        fields = [
            'id',
            'user',
            'date_created',
            'from_date',
            'to_date',
            'justification',
            'means',
            'means_display',
            'status',
            'status_display',
            'duration_days',
            'response_note',
            'responded_by',
            'responded_at',
        ]
        read_only_fields = fields


class LeaveCreateSerializer(serializers.Serializer):
    """
    Input for a new leave request.
    `user` is only honoured for super users; everyone else requests for themselves.
    """
    user = serializers.CharField(required=False, max_length=150)
    from_date = serializers.DateField()
    to_date = serializers.DateField()
    justification = serializers.CharField(required=False, allow_blank=True, default='')
    means = serializers.ChoiceField(choices=LeaveMeans.choices, default=LeaveMeans.EMAIL)

    def validate(self, attrs):
        if attrs['from_date'] > attrs['to_date']:
            raise serializers.ValidationError(
                {'to_date': 'The end date cannot be before the start date.'}
            )
        return attrs


class LeaveStatusSerializer(serializers.Serializer):
    """Optional note stored with an approve/deny decision"""
    note = serializers.CharField(required=False, allow_blank=True)
