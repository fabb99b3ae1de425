"""
HTTP surface.

GET /?file=<path> and POST / {"file": "<path>"} return the ValidationReport
as JSON; anything else returns the static API descriptor.
"""
import uvicorn
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, Response

from svg_validator.engine import SVGValidator
from svg_validator.presentation import api_description, render_json
from svg_validator.utils import get_config, get_logger, parse_json_object

logger = get_logger(__name__)

MISSING_FILE_ERROR = "File path is required"

# Methods answered with the API descriptor on unmatched paths
DESCRIPTOR_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _report_response(validator: SVGValidator, file_path: str) -> Response:
    report = validator.evaluate(file_path)
    return Response(content=render_json(report), media_type="application/json")


def create_app(validator: SVGValidator | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        validator: Evaluator to use (defaults to SVGValidator())
    """
    validator = validator or SVGValidator()
    app = FastAPI(title="SVG PWA Validator API", version=validator.version)

    @app.get("/")
    def validate_get(file: str | None = None):
        if file is None:
            return JSONResponse(api_description())
        logger.info(f"GET validation request for {file}")
        return _report_response(validator, file)

    @app.post("/")
    async def validate_post(request: Request):
        payload = parse_json_object(await request.body())
        file_path = payload.get("file") if payload else None
        if not isinstance(file_path, str) or not file_path:
            return JSONResponse({"error": MISSING_FILE_ERROR}, status_code=400)
        logger.info(f"POST validation request for {file_path}")
        return await run_in_threadpool(_report_response, validator, file_path)

    @app.api_route("/{path:path}", methods=DESCRIPTOR_METHODS)
    def describe(path: str):
        return JSONResponse(api_description())

    return app


def main():
    cfg = get_config()
    uvicorn.run(create_app(), host=cfg.get("api.host", "127.0.0.1"), port=int(cfg.get("api.port", 8000)))


if __name__ == "__main__":
    main()
