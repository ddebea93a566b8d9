import logging
from datetime import date
from typing import Optional, Dict

from dateutil.relativedelta import relativedelta
from django.db import DatabaseError, transaction

from .models import MemberProfile
from .pagination import PagedList
from .serializers import MemberSerializer

logger = logging.getLogger(__name__)


def _snapshot(instance) -> Dict:
    return {
        field.name: getattr(instance, field.attname)
        for field in instance._meta.concrete_fields
        if not field.primary_key
    }


class UserRepository:
    def __init__(self, unit_of_work: 'UnitOfWork'):
        self._uow = unit_of_work

    @staticmethod
    def _members():
        return (
            MemberProfile.objects
            .select_related("user")
            .prefetch_related("photos")
        )

    @staticmethod
    def get_user_gender(username: str) -> Optional[str]:
        return (
            MemberProfile.objects
            .filter(user__username=username)
            .values_list("gender", flat=True)
            .first()
        )

    def get_members(self, params: Dict) -> PagedList:
        """
        Page of member projections matching ``params``.

        Expects the validated listing parameters plus ``current_username``,
        which is always excluded from the results.
        """
        today = date.today()
        min_dob = today - relativedelta(years=params["max_age"] + 1)
        max_dob = today - relativedelta(years=params["min_age"])

        queryset = (
            self._members()
            .exclude(user__username=params["current_username"])
            .filter(
                gender=params["gender"],
                date_of_birth__gte=min_dob,
                date_of_birth__lte=max_dob,
            )
        )

        if params["order_by"] == "created":
            queryset = queryset.order_by("-created", "pk")
        else:
            queryset = queryset.order_by("-last_active", "pk")

        page = PagedList.create(queryset, params["page_number"], params["page_size"])
        page[:] = MemberSerializer(page, many=True).data
        return page

    def get_member(self, username: str) -> Optional[Dict]:
        member = self._members().filter(user__username=username).first()
        if member is None:
            return None
        return MemberSerializer(member).data

    def get_user_by_username(self, username: str) -> Optional[MemberProfile]:
        """Load the profile and its photos, tracked for the next commit."""
        member = self._members().filter(user__username=username).first()
        if member is None:
            return None

        self._uow.track(member)
        for photo in member.photos.all():
            self._uow.track(photo)
        return member

    def update(self, member: MemberProfile):
        self._uow.mark_modified(member)


class UnitOfWork:
    """
    Collects changes made during one request and writes them in a single
    transaction.

    Tracked instances are compared against the snapshot taken when they were
    loaded; only changed fields are saved. ``complete()`` reports whether
    anything was written.
    """

    def __init__(self):
        self._tracked = []
        self._modified = []
        self._added = []
        self._removed = []
        self.users = UserRepository(self)

    def track(self, instance):
        self._tracked.append((instance, _snapshot(instance)))
        return instance

    def mark_modified(self, instance):
        if not any(instance is obj for obj in self._modified):
            self._modified.append(instance)

    def add(self, instance):
        self._added.append(instance)

    def remove(self, instance):
        for index, obj in enumerate(self._added):
            if obj is instance:
                del self._added[index]
                return
        self._removed.append(instance)

    def _is_removed(self, instance) -> bool:
        return any(instance is obj for obj in self._removed)

    def _pending_updates(self):
        updates = []
        for instance, snapshot in self._tracked:
            if self._is_removed(instance):
                continue
            if any(instance is obj for obj in self._modified):
                updates.append((instance, None))
                continue
            current = _snapshot(instance)
            changed = [name for name, value in current.items() if snapshot[name] != value]
            if changed:
                updates.append((instance, changed))

        tracked_ids = {id(instance) for instance, _ in self._tracked}
        for instance in self._modified:
            if id(instance) not in tracked_ids and not self._is_removed(instance):
                updates.append((instance, None))
        return updates

    def has_changes(self) -> bool:
        return bool(self._added or self._removed or self._pending_updates())

    def complete(self) -> bool:
        updates = self._pending_updates()
        if not (self._added or self._removed or updates):
            return False

        try:
            with transaction.atomic():
                for instance in self._removed:
                    instance.delete()
                for instance, fields in updates:
                    if fields is None:
                        instance.save()
                    else:
                        instance.save(update_fields=fields)
                for instance in self._added:
                    instance.save()
        except DatabaseError:
            logger.exception("Failed to commit unit of work")
            return False

        written = len(self._removed) + len(updates) + len(self._added)
        self._reset()
        return written > 0

    def _reset(self):
        kept = [instance for instance, _ in self._tracked if not self._is_removed(instance)]
        self._tracked = []
        for instance in kept + self._added:
            self.track(instance)
        self._modified = []
        self._added = []
        self._removed = []
