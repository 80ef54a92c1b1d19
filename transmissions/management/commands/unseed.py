from django.core.management.base import BaseCommand
from django.db import transaction
from transmissions.models import Handle, Report, User


class Command(BaseCommand):
    """
    Management command to remove (unseed) sample data from the database.

    Deletes every report (flags and disputes cascade), every handle and all
    non-staff users, so administrative accounts survive a reset.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        """Execute the unseeding process."""
        with transaction.atomic():
            _, per_model = Report.objects.all().delete()
            reports = per_model.get("transmissions.Report", 0)
            Handle.objects.all().delete()
            _, per_model = User.objects.filter(is_staff=False).delete()
            users = per_model.get("transmissions.User", 0)

        self.stdout.write(self.style.SUCCESS(f"Deleted {reports} reports and {users} non-staff users and related data."))
