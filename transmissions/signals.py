from django.db.models.signals import post_save
from django.dispatch import receiver
from transmissions.models import Flag
from transmissions.services.moderation import apply_flag_threshold


@receiver(post_save, sender=Flag)
def hide_on_repeated_flags(sender, instance, created, **kwargs):
    """Hide a report once enough distinct users have flagged it."""
    if created:
        apply_flag_threshold(instance.report_id)
