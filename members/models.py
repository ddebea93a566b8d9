from datetime import date

from django.db import models
from django.contrib.auth.models import User
from django.utils import timezone


class MemberProfile(models.Model):
    GENDER_CHOICES = [
        ('male', 'Male'),
        ('female', 'Female'),
    ]

    # Link to Django User (One-to-One relationship)
    user = models.OneToOneField(
        User,
        on_delete=models.CASCADE,
        related_name='member',
        primary_key=True
    )

    # Basic Info
    known_as = models.CharField(max_length=100, blank=True)
    date_of_birth = models.DateField(null=True, blank=True)
    gender = models.CharField(max_length=20, choices=GENDER_CHOICES, blank=True)

    # Editable by the member
    introduction = models.TextField(blank=True)
    looking_for = models.TextField(blank=True)
    interests = models.TextField(blank=True)
    city = models.CharField(max_length=100, blank=True)
    country = models.CharField(max_length=100, blank=True)

    # Metadata
    created = models.DateTimeField(default=timezone.now)
    last_active = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'member_profiles'
        verbose_name = 'Member Profile'
        verbose_name_plural = 'Member Profiles'

    def __str__(self):
        return f"{self.user.username}'s Profile"

    @property
    def username(self) -> str:
        return self.user.username

    @property
    def age(self) -> int | None:
        if not self.date_of_birth:
            return None
        today = date.today()
        return today.year - self.date_of_birth.year - (
            (today.month, today.day) < (self.date_of_birth.month, self.date_of_birth.day)
        )

    @property
    def main_photo(self):
        """First photo flagged as main, read from the prefetched collection when available."""
        for photo in self.photos.all():
            if photo.is_main:
                return photo
        return None


class Photo(models.Model):
    member = models.ForeignKey(
        MemberProfile,
        on_delete=models.CASCADE,
        related_name='photos'
    )
    url = models.URLField(max_length=500)
    # Identifier of the asset in the media service; null for externally hosted photos
    public_id = models.CharField(max_length=255, null=True, blank=True)
    is_main = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'member_photos'
        ordering = ['id']

    def __str__(self):
        main = " (main)" if self.is_main else ""
        return f"{self.member.user.username} - {self.url}{main}"
