import logging

from django.db                   import DatabaseError
from rest_framework              import generics, status
from rest_framework.exceptions   import ParseError, UnsupportedMediaType
from rest_framework.parsers      import JSONParser
from rest_framework.permissions  import AllowAny, IsAdminUser
from rest_framework.response     import Response
from rest_framework.views        import APIView

from .models        import ContactMessage
from .notifications import send_submission_notifications
from .serializers   import (
    ContactSubmissionSerializer,
    ContactMessageSerializer,
    ContactMessageAdminSerializer,
    missing_required_fields,
)

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = 'application/json'


# ─── Public submission ────────────────────────────────────────────────────────

class ContactCreateView(APIView):
    """
    POST /api/contact/  — anyone can submit a message.

    validate → store (status=pending) → email client + operator.
    The response depends only on the store: emails are best-effort and a
    failed dispatch is logged, never returned.
    """
    permission_classes     = [AllowAny]
    authentication_classes = []
    parser_classes         = [JSONParser]

    def post(self, request):
        if JSON_CONTENT_TYPE not in (request.content_type or ''):
            return Response(
                {'error': 'Content-Type must be application/json.'},
                status=status.HTTP_400_BAD_REQUEST,
            )

        if not request.body.strip():
            return Response(
                {'error': 'Request body is empty.'},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            payload = request.data
        except (ParseError, UnsupportedMediaType):
            return Response(
                {'error': 'Request body is not valid JSON.'},
                status=status.HTTP_400_BAD_REQUEST,
            )

        if not isinstance(payload, dict):
            return Response(
                {'error': 'Request body must be a JSON object.'},
                status=status.HTTP_400_BAD_REQUEST,
            )

        # ── Validate ──────────────────────────────────────────────────────────
        missing = missing_required_fields(payload)
        if missing:
            return Response(
                {'error': 'Missing required fields.', 'missing': missing},
                status=status.HTTP_400_BAD_REQUEST,
            )

        serializer = ContactSubmissionSerializer(data=payload)
        if not serializer.is_valid():
            return Response(
                {'error': 'Invalid submission.', 'fields': serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        # ── Store ─────────────────────────────────────────────────────────────
        try:
            contact_message = serializer.save(status=ContactMessage.STATUS_PENDING)
        except DatabaseError:
            logger.exception('Could not store contact message from %s', payload.get('email'))
            return Response(
                {'error': 'Your message could not be saved. Please try again later.'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        # ── Notify (best-effort) ──────────────────────────────────────────────
        send_submission_notifications(contact_message)

        return Response(
            {
                'success': True,
                'message': 'Your message has been sent. We will get back to you shortly.',
                'data':    ContactMessageSerializer(contact_message).data,
            },
            status=status.HTTP_200_OK,
        )


# ─── Staff inbox ──────────────────────────────────────────────────────────────

class ContactListView(generics.ListAPIView):
    """GET /api/contact/messages/?status=<status>  — Admin only: view messages."""
    serializer_class   = ContactMessageSerializer
    permission_classes = [IsAdminUser]

    def get_queryset(self):
        queryset = ContactMessage.objects.all()
        message_status = self.request.query_params.get('status')
        if message_status:
            queryset = queryset.filter(status=message_status)
        return queryset


class ContactDetailView(generics.RetrieveUpdateAPIView):
    """
    GET   /api/contact/messages/<pk>/  — Admin only
    PATCH /api/contact/messages/<pk>/  — update status, response or notes
    """
    queryset           = ContactMessage.objects.all()
    serializer_class   = ContactMessageAdminSerializer
    permission_classes = [IsAdminUser]
