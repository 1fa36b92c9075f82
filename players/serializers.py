from rest_framework import serializers


class PlayerSerializer(serializers.Serializer):
    """Client facing view of a player. Tokens and the alt id stay on the server."""
    playerId = serializers.CharField(source="player_id", read_only=True)
    displayName = serializers.CharField(source="display_name", read_only=True)
    visibleProfile = serializers.BooleanField(source="visible_profile", read_only=True)
    title = serializers.CharField(read_only=True)
    needRefreshToken = serializers.BooleanField(source="need_refresh_token", read_only=True)


def parse_auth_code(request):
    """
    The POST body is the auth code as a bare JSON string. An empty body,
    `null` or a blank string mean no code was sent; any other JSON value is
    rejected.
    """
    # DRF leaves the stream unset when there is no body at all
    if request.stream is None:
        return None
    data = request.data
    if data is None or (isinstance(data, str) and not data.strip()):
        return None
    if not isinstance(data, str):
        raise serializers.ValidationError("Could not parse request contents")
    return data
