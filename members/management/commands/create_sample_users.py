"""
Django management command to create sample members

Run with: python manage.py create_sample_users
"""

from datetime import date

from django.core.management.base import BaseCommand
from django.contrib.auth import get_user_model
from django.db import transaction

from members.models import MemberProfile, Photo

User = get_user_model()

SAMPLE_PASSWORD = 'Pa$$w0rd'

SAMPLE_MEMBERS = [
    {
        'username': 'lisa',
        'profile': {
            'known_as': 'Lisa',
            'date_of_birth': date(1994, 3, 15),
            'gender': 'female',
            'introduction': 'Coffee first, conversation second. Weekend hiker and amateur photographer.',
            'looking_for': 'Someone who enjoys early starts and long trails.',
            'interests': 'Hiking, photography, travel',
            'city': 'Greenbush',
            'country': 'Martinique',
        },
        'photos': ['https://randomuser.me/api/portraits/women/12.jpg'],
    },
    {
        'username': 'karen',
        'profile': {
            'known_as': 'Karen',
            'date_of_birth': date(1990, 7, 22),
            'gender': 'female',
            'introduction': 'Painter by day, board gamer by night.',
            'looking_for': 'A partner for museum trips and game nights.',
            'interests': 'Art, board games, cooking',
            'city': 'Celeryville',
            'country': 'Grenada',
        },
        'photos': ['https://randomuser.me/api/portraits/women/32.jpg'],
    },
    {
        'username': 'todd',
        'profile': {
            'known_as': 'Todd',
            'date_of_birth': date(1988, 11, 8),
            'gender': 'male',
            'introduction': 'Software engineer who spends evenings at the climbing gym.',
            'looking_for': 'Someone curious and kind.',
            'interests': 'Climbing, reading, films',
            'city': 'Orviston',
            'country': 'Cayman Islands',
        },
        'photos': ['https://randomuser.me/api/portraits/men/41.jpg'],
    },
    {
        'username': 'dave',
        'profile': {
            'known_as': 'Dave',
            'date_of_birth': date(1996, 5, 19),
            'gender': 'male',
            'introduction': 'Live music, football and terrible puns.',
            'looking_for': 'Someone to share concerts and inside jokes with.',
            'interests': 'Music, sport, comedy',
            'city': 'Kenwood',
            'country': 'Italy',
        },
        'photos': [],
    },
]


class Command(BaseCommand):
    help = 'Creates sample users with member profiles and photos for testing'

    def handle(self, *args, **kwargs):
        created_count = 0
        skipped_count = 0

        for member_data in SAMPLE_MEMBERS:
            username = member_data['username']

            # Check if user already exists
            if User.objects.filter(username=username).exists():
                self.stdout.write(
                    self.style.WARNING(f'User {username} already exists, skipping...')
                )
                skipped_count += 1
                continue

            with transaction.atomic():
                user = User.objects.create_user(
                    username=username,
                    email=f'{username}@example.com',
                    password=SAMPLE_PASSWORD
                )
                member = MemberProfile.objects.create(user=user, **member_data['profile'])

                # The first photo becomes the main photo
                for index, url in enumerate(member_data['photos']):
                    Photo.objects.create(member=member, url=url, is_main=index == 0)

            self.stdout.write(self.style.SUCCESS(f'Created user: {username}'))
            created_count += 1

        self.stdout.write(
            self.style.SUCCESS(
                f'\nDone! Created {created_count} users, skipped {skipped_count} existing users.'
            )
        )
        self.stdout.write(
            self.style.WARNING(f'\nPassword for all sample users: {SAMPLE_PASSWORD}\n')
        )
