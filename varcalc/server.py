"""HTTP front end: the solve endpoint, its API description and the serving command."""

from __future__ import annotations

import argparse
import json
import logging
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Optional, Sequence, Union

from .builder import ExpressionBuilder
from .calculator import Calculator
from .dto import Instruction, VarValue
from .processor import ConcurrentProcessor
from .validator import Validator

logger = logging.getLogger(__name__)

BASE_PATH = "/api/v1"
SOLVE_PATH = BASE_PATH + "/solve"
SWAGGER_PATH = "/swagger/doc.json"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_DELAY = 0.05
DEFAULT_WORKERS = 10


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid number literal {name}")


def _error(code: str, message: str) -> dict[str, str]:
    return {"status": "", "code": code, "message": message}


def _as_int(operand: Any) -> Any:
    return int(operand) if isinstance(operand, float) else operand


class CalculatorApi:
    """Handles solve requests: parses the body, runs the batch and shapes the reply."""

    def __init__(self, processor: ConcurrentProcessor) -> None:
        self.processor = processor

    def handle(self, body: Union[bytes, str]) -> tuple[int, Any]:
        """Return the HTTP status and the JSON payload for a request body."""
        try:
            data = json.loads(body, parse_constant=_reject_constant)
            if not isinstance(data, list):
                raise TypeError(
                    f"expected a JSON array of instructions, got {type(data).__name__}"
                )
            parsed = [Instruction.from_dict(item) for item in data]
        except (ValueError, TypeError) as err:
            return HTTPStatus.BAD_REQUEST, _error(
                "VALIDATION_ERROR", f"invalid json body, {err}"
            )

        instructions = [
            Instruction(
                type=item.type,
                variable=item.variable,
                operator=item.operator,
                left=_as_int(item.left),
                right=_as_int(item.right),
            )
            for item in parsed
        ]

        try:
            results = self.processor.process(instructions)
        except (ValueError, TypeError) as err:
            return HTTPStatus.INTERNAL_SERVER_ERROR, str(err)

        items = [VarValue(var=kvp.key, value=kvp.value).to_dict() for kvp in results]
        return HTTPStatus.OK, {"items": items}


def swagger_document(
    host: str = "localhost:8080", base_path: str = BASE_PATH
) -> dict[str, Any]:
    """Return the Swagger 2.0 description of the API."""
    return {
        "schemes": [],
        "swagger": "2.0",
        "info": {
            "description": "Calculator service API",
            "title": "Calculator API",
            "contact": {},
            "version": "1.0",
        },
        "host": host,
        "basePath": base_path,
        "paths": {
            "/solve": {
                "post": {
                    "description": "Evaluates a mathematical expression",
                    "consumes": ["application/json"],
                    "produces": ["application/json"],
                    "tags": ["calculator"],
                    "summary": "Evaluate an expression",
                    "parameters": [
                        {
                            "description": "List of instructions",
                            "name": "instructions",
                            "in": "body",
                            "required": True,
                            "schema": {
                                "type": "array",
                                "items": {"$ref": "#/definitions/dto.Instruction"},
                            },
                        }
                    ],
                    "responses": {
                        "200": {
                            "description": "OK",
                            "schema": {
                                "type": "object",
                                "properties": {
                                    "items": {
                                        "type": "array",
                                        "items": {
                                            "$ref": "#/definitions/dto.VarValue"
                                        },
                                    }
                                },
                            },
                        },
                        "400": {
                            "description": "Bad Request",
                            "schema": {"$ref": "#/definitions/controllers.Error"},
                        },
                        "500": {
                            "description": "Internal Server Error",
                            "schema": {"type": "string"},
                        },
                    },
                }
            }
        },
        "definitions": {
            "controllers.Error": {
                "type": "object",
                "properties": {
                    "code": {"type": "string"},
                    "message": {"type": "string"},
                    "status": {"type": "string"},
                },
            },
            "dto.Instruction": {
                "type": "object",
                "properties": {
                    "type": {"type": "string", "example": "calc"},
                    "var": {"type": "string", "example": "x"},
                    "op": {"type": "string", "example": "+"},
                    "left": {"example": 5},
                    "right": {"example": 3},
                },
            },
            "dto.VarValue": {
                "type": "object",
                "properties": {
                    "value": {"type": "integer"},
                    "var": {"type": "string"},
                },
            },
        },
    }


def build_processor(
    delay: float = DEFAULT_DELAY, workers: int = DEFAULT_WORKERS
) -> ConcurrentProcessor:
    """Wire a validator, builder and calculator into a processor."""
    builder = ExpressionBuilder(Validator())
    return ConcurrentProcessor(builder, Calculator(delay), workers)


def make_server(
    api: CalculatorApi, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT
) -> ThreadingHTTPServer:
    """Return a bound, not yet serving, HTTP server for ``api``."""
    document: dict[str, Any] = {}

    class Handler(BaseHTTPRequestHandler):
        def _reply(self, status: int, payload: Any) -> None:
            data = json.dumps(payload, ensure_ascii=False).encode("utf-8")
            self.send_response(status)
            self.send_header("Content-Type", "application/json; charset=utf-8")
            self.send_header("Content-Length", str(len(data)))
            self.end_headers()
            self.wfile.write(data)

        def _not_found(self) -> None:
            self._reply(HTTPStatus.NOT_FOUND, _error("NOT_FOUND", "404 page not found"))

        def do_POST(self) -> None:
            if self.path != SOLVE_PATH:
                self._not_found()
                return
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length) if length > 0 else b""
            status, payload = api.handle(body)
            self._reply(status, payload)

        def do_GET(self) -> None:
            if self.path != SWAGGER_PATH:
                self._not_found()
                return
            self._reply(HTTPStatus.OK, document)

        def log_message(self, format: str, *args: Any) -> None:
            logger.info("%s - %s", self.address_string(), format % args)

    server = ThreadingHTTPServer((host, port), Handler)
    bound_host = host if host not in ("", "0.0.0.0") else "localhost"
    document.update(swagger_document(f"{bound_host}:{server.server_address[1]}"))
    return server


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Serve the calculator API until interrupted."""
    parser = argparse.ArgumentParser(description="Serve the calculator API over HTTP.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument(
        "--delay", type=float, default=DEFAULT_DELAY,
        help="seconds spent on each operation",
    )
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    api = CalculatorApi(build_processor(args.delay, args.workers))
    with make_server(api, args.host, args.port) as server:
        logger.info("HTTP server running on %s:%d", args.host, server.server_address[1])
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            logger.info("shutting down")
    return 0