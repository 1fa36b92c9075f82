import logging

from rest_framework import permissions

from .session import bound_player_id, invalidate

logger = logging.getLogger(__name__)


class PlayerSessionPermission(permissions.BasePermission):
    """
    One player id per session, as a simple security measure.

    Reads (GET) need the session already bound to the player in the url.
    Writes (POST) are allowed on an unbound session, which is how the binding
    gets made, or on a session bound to the same player. Anything else
    invalidates the session.
    Usage:
        permission_classes = [PlayerSessionPermission]
        player_id_kwarg = "player_id"
    """
    message = "Invalid session state"

    def has_permission(self, request, view):
        player_id = view.kwargs.get(getattr(view, "player_id_kwarg", "player_id"))
        bound = bound_player_id(request.session)

        if request.method in permissions.SAFE_METHODS:
            allowed = bound is not None and bound == player_id
        else:
            allowed = bound is None or bound == player_id

        if not allowed:
            logger.warning(f"Session bound to {bound!r} used for player {player_id!r} in {request.method}")
            invalidate(request.session)
        return allowed
