from django.utils   import timezone
from rest_framework import serializers
from .models        import ContactMessage, MESSAGE_MAX_LENGTH

# Payload keys, as the frontend form sends them.
REQUIRED_FIELDS = ('name', 'email', 'message', 'serviceType')
OPTIONAL_FIELDS = ('phone', 'eventDate', 'howFoundUs')


def missing_required_fields(payload):
    """
    Names of required keys that are absent or blank.  `acceptPrivacy` counts
    as missing unless it is literally `true`.
    """
    missing = [
        field for field in REQUIRED_FIELDS
        if not str(payload.get(field) or '').strip()
    ]
    if payload.get('acceptPrivacy') is not True:
        missing.append('acceptPrivacy')
    return missing


class ContactSubmissionSerializer(serializers.ModelSerializer):
    """Validates the public form payload and maps it onto ContactMessage."""
    serviceType = serializers.CharField(source='service_type', max_length=100)
    eventDate   = serializers.DateField(source='event_date', required=False, allow_null=True)
    howFoundUs  = serializers.CharField(
                      source='how_found_us', max_length=100,
                      required=False, allow_null=True,
                  )
    phone       = serializers.CharField(max_length=30, required=False, allow_null=True)
    message     = serializers.CharField(max_length=MESSAGE_MAX_LENGTH, trim_whitespace=False)

    class Meta:
        model  = ContactMessage
        fields = ('name', 'email', 'phone', 'serviceType', 'eventDate', 'message', 'howFoundUs')

    def to_internal_value(self, data):
        # Empty form inputs arrive as "" and are stored as null.
        data = dict(data)
        for field in OPTIONAL_FIELDS:
            if isinstance(data.get(field), str) and not data[field].strip():
                data[field] = None
        return super().to_internal_value(data)

    def validate_message(self, value):
        if not value.strip():
            raise serializers.ValidationError('Message cannot be blank.')
        return value


class ContactMessageSerializer(serializers.ModelSerializer):
    """The stored record, as returned to the submitter and to staff."""

    class Meta:
        model  = ContactMessage
        fields = (
            'id', 'name', 'email', 'phone', 'service_type', 'event_date',
            'message', 'how_found_us', 'status', 'response', 'responded_at',
            'notes', 'created_at', 'updated_at',
        )
        read_only_fields = fields


class ContactMessageAdminSerializer(serializers.ModelSerializer):
    """
    Staff updates from the inbox.  Only the workflow fields are writable;
    writing a response stamps `responded_at` and, unless a status is sent
    along, marks the message as responded.
    """

    class Meta:
        model  = ContactMessage
        fields = ContactMessageSerializer.Meta.fields
        read_only_fields = (
            'id', 'name', 'email', 'phone', 'service_type', 'event_date',
            'message', 'how_found_us', 'responded_at', 'created_at', 'updated_at',
        )

    def update(self, instance, validated_data):
        response = validated_data.get('response')
        if response and response != instance.response:
            validated_data['responded_at'] = timezone.now()
            validated_data.setdefault('status', ContactMessage.STATUS_RESPONDED)
        return super().update(instance, validated_data)
