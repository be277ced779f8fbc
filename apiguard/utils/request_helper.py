import json

from litestar.connection import Request

# Headers that must never reach the logs
REDACTED_HEADERS = {"authorization", "cookie", "openai-api-key"}


class RequestHelper:
    """Helper class for request logging."""

    @staticmethod
    def request_dump(request: Request) -> str:
        """Dump the request metadata as JSON, with credentials redacted."""
        headers = {
            name: "[redacted]" if name.lower() in REDACTED_HEADERS else value
            for name, value in request.headers.items()
        }

        log_data = {
            "method": request.method,
            "url": str(request.url),
            "headers": headers,
            "query_params": dict(request.query_params),
            "path_params": request.path_params,
        }

        return json.dumps(log_data, indent=2)

    @staticmethod
    def request_details(request: Request) -> str:
        """One line access-log style summary of the request."""
        ip = request.client.host if request.client else "-"
        http_version = f'HTTP/{request.scope.get("http_version")}'

        return f'{ip} - "{request.method} {request.url.path} {http_version}" Received'
