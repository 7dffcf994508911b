"""Data models: access tokens, the response envelope and API resources."""

from imgur_api.models.envelope import ApiEnvelope
from imgur_api.models.resource import Album, Image, Resource
from imgur_api.models.token import AccessToken

__all__ = ["AccessToken", "Album", "ApiEnvelope", "Image", "Resource"]
