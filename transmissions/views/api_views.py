import logging
from django.conf import settings
from rest_framework import generics, permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from transmissions.exceptions import (
    ConflictError,
    NotFoundError,
    StoreError,
    SurfaceLogError,
    ValidationError,
)
from transmissions.serializers import (
    DisputeSerializer,
    LeaderboardsSerializer,
    ReportSerializer,
    ReportSubmissionSerializer,
)
from transmissions.services import (
    FeedService,
    LeaderboardService,
    ModerationService,
    ReportingService,
)

logger = logging.getLogger(__name__)

__all__ = [
    "ReportListApi",
    "search_api",
    "handle_api",
    "leaderboards_api",
    "flag_api",
    "dispute_api",
    "profile_api",
]

_STATUS_FOR_ERROR = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_409_CONFLICT),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (StoreError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def error_response(exc: SurfaceLogError) -> Response:
    """Map a domain error onto an HTTP status with a ``detail`` message."""
    for error_class, code in _STATUS_FOR_ERROR:
        if isinstance(exc, error_class):
            return Response({"detail": exc.message}, status=code)
    return Response({"detail": exc.message}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class ReportListApi(generics.GenericAPIView):
    """List the latest visible reports, and accept new submissions."""
    serializer_class = ReportSubmissionSerializer
    permission_classes = [permissions.IsAuthenticatedOrReadOnly]

    def get(self, request):
        """Latest visible reports, newest first."""
        try:
            limit = int(request.query_params.get("limit") or settings.SURFACELOG_FEED_LIMIT)
        except ValueError:
            return Response({"detail": "limit must be an integer."}, status=status.HTTP_400_BAD_REQUEST)
        limit = max(1, min(limit, 100))
        try:
            page = FeedService().latest(request.user, limit=limit)
        except StoreError as e:
            return error_response(e)
        return Response({
            "results": ReportSerializer(page.reports, many=True).data,
            "flagged_ids": sorted(page.flagged_ids),
        })

    def post(self, request):
        """Submit a report against a handle, creating the handle if needed."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            report = ReportingService().submit_transmission(request.user, **serializer.validated_data)
        except SurfaceLogError as e:
            return error_response(e)
        return Response(ReportSerializer(report).data, status=status.HTTP_201_CREATED)


@api_view(['GET'])
def search_api(request):
    """Search reports by handle."""
    try:
        result = FeedService().search(request.query_params.get("q"))
    except StoreError as e:
        return error_response(e)
    return Response({
        "query": result.query,
        "status": result.status,
        "results": ReportSerializer(result.reports, many=True).data,
    })


@api_view(['GET'])
def handle_api(request, handle):
    """History for one canonical handle."""
    try:
        history = FeedService().handle_history(handle)
    except StoreError as e:
        return error_response(e)
    return Response({
        "handle": history.raw_handle,
        "signature": history.signature,
        "display_name": history.display_name,
        "platform": history.platform_label,
        "status": history.status,
        "results": ReportSerializer(history.reports, many=True).data,
    })


@api_view(['GET'])
def leaderboards_api(request):
    """Ranked watchlists over the recent aggregation window."""
    try:
        boards = LeaderboardService().build(top=settings.SURFACELOG_LEADERBOARD_SIZE)
    except StoreError as e:
        return error_response(e)
    return Response(LeaderboardsSerializer(boards).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def flag_api(request, report_id):
    """Flag a report once per user."""
    try:
        ModerationService(request.user).flag(report_id)
    except SurfaceLogError as e:
        return error_response(e)
    return Response({"flagged": True, "report_id": str(report_id)}, status=status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def dispute_api(request, report_id):
    """Record a correction request for a report."""
    serializer = DisputeSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    try:
        dispute = ModerationService(request.user).dispute(report_id, serializer.validated_data["message"])
    except SurfaceLogError as e:
        return error_response(e)
    return Response({"id": dispute.id, "report_id": str(report_id)}, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def profile_api(request):
    """
    Protected endpoint returning the account linked to the bearer token
    or session.
    """
    user = request.user
    return Response({
        "uid": user.firebase_uid or user.username,
        "email": user.email,
    })
