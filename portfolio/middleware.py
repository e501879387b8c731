from urllib.parse import parse_qs

OVERRIDABLE_METHODS = {"PUT", "PATCH", "DELETE"}


class MethodOverrideMiddleware:
    """Let HTML forms send PUT/DELETE as ``POST /path?_method=PUT``."""

    def __init__(self, app, param: str = "_method"):
        self.app = app
        self.param = param

    def __call__(self, environ, start_response):
        if environ.get("REQUEST_METHOD", "").upper() == "POST":
            values = parse_qs(environ.get("QUERY_STRING", "")).get(self.param)
            method = (values[0] if values else "").strip().upper()
            if method in OVERRIDABLE_METHODS:
                environ["REQUEST_METHOD"] = method
        return self.app(environ, start_response)
