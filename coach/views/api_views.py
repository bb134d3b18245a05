from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from coach.serializers.insight import IndustryInsightSerializer
from coach.services.dashboard_service import get_industry_insights
from coach.services.errors import CoachError, NotFoundError, UnauthorizedError
from coach.services.profile_service import get_onboarding_status
from coach.services.session import caller_from_request


class OnboardingStatusView(APIView):
    """/api/onboarding-status/  → {"isOnboarded": bool}; never errors."""

    def get(self, request):
        status_ = get_onboarding_status(caller_from_request(request))
        return Response({"isOnboarded": status_["is_onboarded"]})


class IndustryInsightView(APIView):
    """/api/insights/  → the caller's industry insight."""

    def get(self, request):
        try:
            insight = get_industry_insights(caller_from_request(request))
        except UnauthorizedError:
            return Response({"ok": False, "error": "Unauthorized"}, status=status.HTTP_401_UNAUTHORIZED)
        except NotFoundError as e:
            return Response({"ok": False, "error": str(e)}, status=status.HTTP_404_NOT_FOUND)
        except CoachError:
            return Response({"ok": False, "error": "Insights are unavailable right now."},
                            status=status.HTTP_502_BAD_GATEWAY)
        return Response(IndustryInsightSerializer(insight).data)
