import logging
from typing import Iterable, List, Pattern, Set, Tuple

from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.routing import compile_path

from app.core.errors import StoreError

logger = logging.getLogger(__name__)

# Methods listed in Access-Control-Allow-Methods, in this order
_METHOD_ORDER = ["GET", "POST", "PUT", "PATCH", "DELETE"]

MethodTable = List[Tuple[Pattern, Set[str]]]


def collect_routes(routes: Iterable, prefix: str = "") -> MethodTable:
    """(path regex, methods) for every APIRoute, descending into nested routers."""
    table: MethodTable = []
    for route in routes:
        if isinstance(route, APIRoute):
            regex, _, _ = compile_path(prefix + route.path)
            table.append((regex, set(route.methods or [])))
        elif hasattr(route, "routes"):
            table.extend(collect_routes(route.routes, prefix + getattr(route, "prefix", "")))
    return table


def allowed_methods(table: MethodTable, path: str) -> List[str]:
    """Verbs served at this path; empty if no route matches it."""
    methods: Set[str] = set()
    for regex, route_methods in table:
        if regex.match(path):
            methods.update(route_methods)
    return [m for m in _METHOD_ORDER if m in methods]


def cors_headers(methods: List[str]) -> List[tuple]:
    return [
        (b"access-control-allow-origin", b"*"),
        (b"access-control-allow-methods", ",".join(methods + ["OPTIONS"]).encode()),
        (b"access-control-allow-headers", b"Content-Type"),
    ]


class CORSHeadersMiddleware:
    """Adds open CORS headers to every response and answers preflight requests.

    The allowed-method list is per route, so a preflight for /tournaments/{id}
    advertises GET,PATCH,DELETE while /teams advertises GET,POST. Routes are
    read from the module routers handed in at construction, mounted under
    `prefix`.
    """

    def __init__(self, app, routers: Iterable, prefix: str = ""):
        self.app = app
        self.table: MethodTable = []
        for router in routers:
            self.table.extend(collect_routes(router.routes, prefix))

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        methods = allowed_methods(self.table, scope["path"])
        if not methods:
            await self.app(scope, receive, send)
            return

        headers = cors_headers(methods)
        if scope["method"] == "OPTIONS":
            await send({
                "type": "http.response.start",
                "status": 200,
                "headers": headers + [(b"content-length", b"0")],
            })
            await send({"type": "http.response.body", "body": b""})
            return

        response_started = False

        async def send_with_headers(message):
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
                message.setdefault("headers", [])
                message["headers"] = list(message["headers"]) + headers
            await send(message)

        try:
            await self.app(scope, receive, send_with_headers)
        except Exception as exc:
            if response_started:
                raise
            logger.exception("Unhandled exception: %s", exc)
            response = JSONResponse(status_code=500, content=StoreError().to_envelope())
            await response(scope, receive, send_with_headers)
