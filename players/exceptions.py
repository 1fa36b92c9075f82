class ConfigurationError(Exception):
    """The server has no usable client id/secret. Fatal for every exchange."""


class UpstreamError(Exception):
    """The token endpoint or Games API answered with something unusable."""
