from django.core.management import call_command

from members.models import MemberProfile, Photo


def test_create_sample_users_is_idempotent(db):
    call_command("create_sample_users")
    call_command("create_sample_users")

    assert MemberProfile.objects.count() == 4
    # Every member with photos has exactly one main photo
    for member in MemberProfile.objects.filter(photos__isnull=False).distinct():
        assert member.photos.filter(is_main=True).count() == 1
    assert Photo.objects.count() == 3
