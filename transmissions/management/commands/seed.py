"""Management command to seed the database with sample users, handles and reports."""

from datetime import timedelta
from random import choice, randint, random

from faker import Faker
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from transmissions.models import Report, User
from transmissions.services import HandleResolver, ReportingService

PLATFORMS = ["PC", "PS5", "Xbox", None]

DESCRIPTION_PHRASES = {
    "good": [
        "Shared loot and covered the extract.",
        "Good comms, called out every third party.",
        "Revived me twice and waited at extraction.",
    ],
    "neutral": [
        "Quiet, did their own thing.",
        "Passed by without engaging.",
    ],
    "bad": [
        "Left the squad at the objective.",
        "Mic spam the whole match.",
    ],
    "rat": [
        "Waved friendly then shot us at extraction.",
        "Camped the spawn in and looted our bodies.",
    ],
}


class Command(BaseCommand):
    """Management command to seed the board with sample transmissions."""
    USER_COUNT = 20
    HANDLE_COUNT = 40
    REPORTS_PER_HANDLE = (1, 8)
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample data'

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')

    def add_arguments(self, parser):
        parser.add_argument("--handles", type=int, default=self.HANDLE_COUNT)

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        users = self.create_users()
        handle_ids = self.create_handles(options["handles"])
        count = self.create_reports(users, handle_ids)
        self.stdout.write(self.style.SUCCESS(f"Seeding complete: {count} reports"))

    def create_users(self):
        """Create sample reporters."""
        users = []
        while len(users) < self.USER_COUNT:
            email = self.faker.unique.email()
            user, created = User.objects.get_or_create(
                email=email,
                defaults={"username": email.split("@")[0] + str(len(users))},
            )
            if created:
                user.set_password(self.DEFAULT_PASSWORD)
                user.save(update_fields=["password"])
            users.append(user)
        return users

    def create_handles(self, count):
        """Resolve random gamer tags, written with assorted separators."""
        resolver = HandleResolver()
        ids = []
        for _ in range(count):
            tag = self.faker.user_name()
            spelled = tag.replace("_", choice([" ", "-", ".", "_"]))
            ids.append(resolver.resolve(spelled, choice(PLATFORMS)))
        return list(dict.fromkeys(ids))

    def create_reports(self, users, handle_ids):
        """Submit reports spread over the past month."""
        service = ReportingService()
        now = timezone.now()
        count = 0
        with transaction.atomic():
            for handle_id in handle_ids:
                for _ in range(randint(*self.REPORTS_PER_HANDLE)):
                    sentiment = choice([key for key, _ in Report.SENTIMENT_CHOICES])
                    report_id = service.submit(
                        handle_id,
                        sentiment,
                        choice([key for key, _ in Report.SEVERITY_CHOICES]),
                        choice([key for key, _ in Report.ENCOUNTER_CHOICES]),
                        Report.DEFAULT_CATEGORY,
                        choice(DESCRIPTION_PHRASES[sentiment]),
                        reporter=choice(users),
                    )
                    # created_at is auto_now_add, so backdate after insert
                    age = timedelta(days=30 * random() ** 2)
                    Report.objects.filter(id=report_id).update(created_at=now - age)
                    count += 1
        return count
