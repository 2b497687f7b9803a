import logging

from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import Leave

logger = logging.getLogger(__name__)


@receiver(post_save, sender=Leave)
def notify_on_leave_change(sender, instance, created, update_fields=None, **kwargs):
    """
    Announce new leave requests and status decisions in the application log.
    """
    if created:
        logger.info(
            f"New leave request #{instance.id} from {instance.user}: "
            f"{instance.from_date} - {instance.to_date} via {instance.get_means_display()}"
        )
    elif update_fields and 'status' in update_fields:
        note = f": {instance.response_note}" if instance.response_note else ''
        logger.info(
            f"Leave request #{instance.id} for {instance.user} {instance.get_status_display().lower()} "
            f"by {instance.responded_by or 'unknown'}{note}"
        )
