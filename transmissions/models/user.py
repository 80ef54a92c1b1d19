"""Custom user model linked to a Firebase Auth identity."""

from django.contrib.auth.models import AbstractUser
from django.db import models
from libgravatar import Gravatar


class User(AbstractUser):
    """Local account for a signed-in reporter."""

    username = models.CharField(max_length=150, unique=True)
    email = models.EmailField(unique=True, blank=False)
    firebase_uid = models.CharField(
        max_length=128,
        unique=True,
        null=True,
        blank=True,
        help_text="Firebase Auth uid this account is linked to",
    )

    class Meta:
        """Default ordering for users."""
        ordering = ['email']

    def gravatar(self, size=120):
        """Return gravatar URL for the user's email."""
        gravatar_object = Gravatar(self.email)
        return gravatar_object.get_image(size=size, default='mp')

    def mini_gravatar(self):
        """Return smaller gravatar URL."""
        return self.gravatar(size=40)
