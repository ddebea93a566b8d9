import logging

from django.urls import reverse
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import Photo
from .pagination import MemberPagination
from .photos import get_photo_service
from .repositories import UnitOfWork
from .serializers import MemberParamsSerializer, MemberUpdateSerializer, PhotoSerializer

logger = logging.getLogger(__name__)


# ============================================================
# HELPERS
# ============================================================

def profile_not_found():
    return Response(
        {"detail": "Profile not found. Please complete your profile first."},
        status=status.HTTP_404_NOT_FOUND,
    )


def find_photo(member, photo_id):
    return next((p for p in member.photos.all() if p.id == photo_id), None)


# ============================================================
# MEMBERS
# ============================================================

class UserListView(APIView):
    """List members (GET) and update the caller's own profile (PUT)."""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        params_serializer = MemberParamsSerializer(data=request.query_params)
        if not params_serializer.is_valid():
            return Response(
                {"detail": "Invalid query parameters", "errors": params_serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        uow = UnitOfWork()
        username = request.user.username
        params = dict(params_serializer.validated_data)
        params["current_username"] = username

        if not params["gender"]:
            gender = uow.users.get_user_gender(username)
            params["gender"] = "female" if gender == "male" else "male"

        users = uow.users.get_members(params)

        return MemberPagination().get_paginated_response(users)

    def put(self, request):
        uow = UnitOfWork()
        member = uow.users.get_user_by_username(request.user.username)
        if member is None:
            return profile_not_found()

        serializer = MemberUpdateSerializer(member, data=request.data, partial=True)
        if not serializer.is_valid():
            return Response(
                {"detail": "Invalid data", "errors": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )
        serializer.save()

        uow.users.update(member)

        if uow.complete():
            return Response(status=status.HTTP_204_NO_CONTENT)

        return Response(
            {"detail": "Failed to update user"},
            status=status.HTTP_400_BAD_REQUEST,
        )


class UserDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, username):
        member = UnitOfWork().users.get_member(username)
        if member is None:
            # Unknown usernames yield an empty result rather than 404
            return Response(status=status.HTTP_204_NO_CONTENT)
        return Response(member, status=status.HTTP_200_OK)


# ============================================================
# PHOTOS
# ============================================================

class AddPhotoView(APIView):
    permission_classes = [IsAuthenticated]
    parser_classes = [MultiPartParser, FormParser]

    def post(self, request):
        uow = UnitOfWork()
        member = uow.users.get_user_by_username(request.user.username)
        if member is None:
            return profile_not_found()

        file_obj = request.FILES.get("file")
        if not file_obj:
            return Response(
                {"detail": "No file uploaded"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        result = get_photo_service().add_photo(file_obj)
        if result.error is not None:
            return Response(
                {"detail": result.error},
                status=status.HTTP_400_BAD_REQUEST,
            )

        photo = Photo(
            member=member,
            url=result.secure_url,
            public_id=result.public_id,
        )

        if len(member.photos.all()) == 0:
            photo.is_main = True

        uow.add(photo)

        if uow.complete():
            location = request.build_absolute_uri(
                reverse("members:get-user", kwargs={"username": member.username})
            )
            return Response(
                PhotoSerializer(photo).data,
                status=status.HTTP_201_CREATED,
                headers={"Location": location},
            )

        return Response(
            {"detail": "Problem adding photo"},
            status=status.HTTP_400_BAD_REQUEST,
        )


class SetMainPhotoView(APIView):
    permission_classes = [IsAuthenticated]

    def put(self, request, photo_id):
        uow = UnitOfWork()
        member = uow.users.get_user_by_username(request.user.username)
        if member is None:
            return profile_not_found()

        photo = find_photo(member, photo_id)
        if photo is None:
            return Response(
                {"detail": "Photo not found"},
                status=status.HTTP_404_NOT_FOUND,
            )

        if photo.is_main:
            return Response(
                {"detail": "This is already your main photo"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        current_main = member.main_photo
        if current_main is not None:
            current_main.is_main = False

        photo.is_main = True

        if uow.complete():
            return Response(status=status.HTTP_204_NO_CONTENT)

        return Response(
            {"detail": "Something went wrong"},
            status=status.HTTP_400_BAD_REQUEST,
        )


class DeletePhotoView(APIView):
    permission_classes = [IsAuthenticated]

    def delete(self, request, photo_id):
        uow = UnitOfWork()
        member = uow.users.get_user_by_username(request.user.username)
        if member is None:
            return profile_not_found()

        photo = find_photo(member, photo_id)
        if photo is None:
            return Response(
                {"detail": "Photo not found"},
                status=status.HTTP_404_NOT_FOUND,
            )
        elif photo.is_main:
            return Response(
                {"detail": "You cannot delete your main photo"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        if photo.public_id is not None:
            result = get_photo_service().delete_photo(photo.public_id)
            if result.error is not None:
                # Not reported to the caller; the local record is removed regardless
                logger.warning(f"Media deletion failed for photo {photo.id}: {result.error}")

        uow.remove(photo)

        if uow.complete():
            return Response(status=status.HTTP_200_OK)

        return Response(
            {"detail": "Problem occured while deleting photo"},
            status=status.HTTP_400_BAD_REQUEST,
        )
