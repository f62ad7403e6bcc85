"""
Method override middleware so HTML forms can issue PUT and DELETE
"""

import logging
from urllib.parse import parse_qs

logger = logging.getLogger(__name__)

class MethodOverrideMiddleware:
    """
    Re-dispatches a POST as the method named in its query string.

    A form posting to ``/person/<id>?_method=DELETE`` reaches the DELETE
    route. Only POST requests are rewritten, and only to the methods in
    ALLOWED_METHODS.
    """

    OVERRIDE_PARAM = "_method"
    ALLOWED_METHODS = {"PUT", "PATCH", "DELETE"}

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http" and scope["method"] == "POST":
            override = self._requested_method(scope)
            if override in self.ALLOWED_METHODS:
                logger.debug(f"Method override: POST -> {override} {scope['path']}")
                scope = dict(scope, method=override)

        await self.app(scope, receive, send)

    def _requested_method(self, scope) -> str:
        query = parse_qs(scope.get("query_string", b"").decode("latin-1"))
        values = query.get(self.OVERRIDE_PARAM)
        return values[0].upper() if values else ""
