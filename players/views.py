import logging

from django.apps import apps
from rest_framework import status
from rest_framework.parsers import JSONParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from authflow.permissions import PlayerSessionPermission
from authflow.session import bind_player

from .models import PlayerRecord
from .serializers import PlayerSerializer, parse_auth_code
from .services import ExchangeOutcome, PlayerExchangeService

logger = logging.getLogger(__name__)

# /player/test confirms the server is running, without calling Play Games.
TEST_PLAYER_ID = "test"

OUTCOME_STATUS = {
    ExchangeOutcome.SUCCESS: status.HTTP_200_OK,
    ExchangeOutcome.CONFIG_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ExchangeOutcome.EXCHANGE_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ExchangeOutcome.IDENTITY_MISMATCH: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def sample_player() -> PlayerRecord:
    return PlayerRecord(
        player_id="player_123",
        alt_player_id="alt_player_123",
        display_name="Test player",
        visible_profile=False,
    )


class PlayerView(APIView):
    """
    GET  /player/{player_id}  the stored player, for the session's own player.
    POST /player/{player_id}  body is the server auth code as a JSON string;
                              exchanges it and binds the session to the player.

    Bodies must be sent as application/json, anything else gets a 415.
    """
    authentication_classes = []
    permission_classes = [PlayerSessionPermission]
    parser_classes = [JSONParser]
    player_id_kwarg = "player_id"

    def get_permissions(self):
        if self.request.method in ("GET", "HEAD") and self.kwargs.get(self.player_id_kwarg) == TEST_PLAYER_ID:
            return [AllowAny()]
        return super().get_permissions()

    def get_store(self):
        return apps.get_app_config("players").store

    def get(self, request, player_id):
        if player_id == TEST_PLAYER_ID:
            return Response(PlayerSerializer(sample_player()).data)

        player = self.get_store().lookup(player_id)
        if player is None:
            return Response({"detail": "Player not found."}, status=status.HTTP_404_NOT_FOUND)
        return Response(PlayerSerializer(player).data)

    def post(self, request, player_id):
        auth_code = parse_auth_code(request)

        result = PlayerExchangeService(self.get_store()).submit_auth_code(player_id, auth_code)

        if result.outcome == ExchangeOutcome.MISSING_AUTH_CODE:
            return Response({"detail": "Could not parse request contents"}, status=status.HTTP_400_BAD_REQUEST)
        if result.outcome == ExchangeOutcome.UNCHANGED:
            # already authenticated, nothing to do
            return Response(status=status.HTTP_200_OK)

        if result.ok:
            bind_player(request.session, result.player.player_id)
        else:
            logger.info(f"Exchange for player {player_id} ended with {result.outcome.value}")

        return Response(PlayerSerializer(result.player).data, status=OUTCOME_STATUS[result.outcome])


class MalformedPlayerPathView(APIView):
    """Anything under /player that is not /player/{player_id}."""
    authentication_classes = []
    permission_classes = [AllowAny]

    def _bad_request(self, request, *args, **kwargs):
        return Response({"detail": "Could not parse request"}, status=status.HTTP_400_BAD_REQUEST)

    get = post = put = patch = delete = _bad_request
