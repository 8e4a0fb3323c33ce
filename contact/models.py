from datetime   import timedelta

from django.db    import models
from django.utils import timezone

MESSAGE_MAX_LENGTH = 500


class ContactMessage(models.Model):
    """
    One submission of the public contact form.

    Created `pending` by the contact endpoint; every later transition
    (read, responded, archived) is made by staff from the inbox.
    """
    STATUS_PENDING   = 'pending'
    STATUS_READ      = 'read'
    STATUS_RESPONDED = 'responded'
    STATUS_ARCHIVED  = 'archived'

    STATUS_CHOICES = [
        (STATUS_PENDING,   'Pending'),
        (STATUS_READ,      'Read'),
        (STATUS_RESPONDED, 'Responded'),
        (STATUS_ARCHIVED,  'Archived'),
    ]

    name         = models.CharField(max_length=100)
    email        = models.EmailField()
    phone        = models.CharField(max_length=30, blank=True, null=True)
    service_type = models.CharField(max_length=100)
    event_date   = models.DateField(blank=True, null=True)
    message      = models.TextField(max_length=MESSAGE_MAX_LENGTH)
    how_found_us = models.CharField(max_length=100, blank=True, null=True)

    # Inbox workflow
    status       = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    response     = models.TextField(blank=True, null=True)
    responded_at = models.DateTimeField(blank=True, null=True)
    notes        = models.TextField(blank=True, null=True)

    created_at   = models.DateTimeField(auto_now_add=True)
    updated_at   = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def event_is_upcoming(self, within_days=30):
        if not self.event_date:
            return False
        return self.event_date < timezone.localdate() + timedelta(days=within_days)

    def __str__(self):
        return f'[{self.service_type}] {self.name} — {self.email}'
