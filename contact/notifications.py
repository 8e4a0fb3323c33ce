"""
Emails sent after a contact message has been stored.

Both dispatches are best-effort: a failure is captured in that dispatch's
DispatchResult and logged, and never reaches the HTTP response.  The
stored ContactMessage is the source of truth; staff can follow up from the
inbox even when no email went out.
"""
import logging
from dataclasses import dataclass

from django.conf            import settings
from django.core.mail       import EmailMultiAlternatives, get_connection
from django.template.loader import render_to_string

logger = logging.getLogger(__name__)

CLIENT_CONFIRMATION = 'client_confirmation'
ADMIN_ALERT         = 'admin_alert'


@dataclass(frozen=True)
class DispatchResult:
    kind:       str
    recipients: tuple
    sent:       bool
    error:      str = ''


def _header_text(value):
    """Collapses whitespace so submitted text is safe in a mail header."""
    return ' '.join(str(value).split())


def _context(contact_message):
    return {
        'site_name':   settings.SITE_NAME,
        'contact':     contact_message,
        'is_upcoming': contact_message.event_is_upcoming(),
    }


def _dispatch(kind, subject, recipients, context, reply_to=None):
    recipients = tuple(recipients)
    if not recipients:
        logger.error('No recipient configured for %s email', kind)
        return DispatchResult(kind, recipients, False, 'no recipient configured')

    try:
        template   = f'contact/emails/{kind}'
        text_body  = render_to_string(f'{template}.txt', context)
        html_body  = render_to_string(f'{template}.html', context)
        connection = get_connection(timeout=settings.EMAIL_TIMEOUT)

        email = EmailMultiAlternatives(
            subject=subject,
            body=text_body,
            from_email=settings.DEFAULT_FROM_EMAIL,
            to=list(recipients),
            reply_to=list(reply_to or []),
            connection=connection,
        )
        email.attach_alternative(html_body, 'text/html')
        delivered = email.send()
    except Exception as exc:
        logger.exception('Sending %s email to %s failed', kind, ', '.join(recipients))
        return DispatchResult(kind, recipients, False, str(exc))

    if not delivered:
        logger.error('Mail backend accepted no %s email for %s', kind, ', '.join(recipients))
        return DispatchResult(kind, recipients, False, 'not delivered')

    return DispatchResult(kind, recipients, True)


def send_client_confirmation(contact_message):
    return _dispatch(
        CLIENT_CONFIRMATION,
        f'Thank you for your request! - {settings.SITE_NAME}',
        [contact_message.email],
        _context(contact_message),
    )


def send_admin_alert(contact_message):
    operator = settings.CONTACT_NOTIFICATION_EMAIL
    return _dispatch(
        ADMIN_ALERT,
        f'New request: {_header_text(contact_message.service_type)} - {_header_text(contact_message.name)}',
        [operator] if operator else [],
        _context(contact_message),
        reply_to=[contact_message.email],
    )


def send_submission_notifications(contact_message):
    """Attempts both emails independently and returns one result per email."""
    results = [
        send_client_confirmation(contact_message),
        send_admin_alert(contact_message),
    ]

    failed = [result.kind for result in results if not result.sent]
    if failed:
        logger.warning(
            'Contact message %s stored; %d of %d notifications failed (%s)',
            contact_message.pk, len(failed), len(results), ', '.join(failed),
        )
    else:
        logger.info('Contact message %s stored and notifications sent', contact_message.pk)
    return results
