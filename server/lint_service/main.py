import logging
import time
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, Request
from starlette.concurrency import run_in_threadpool
from starlette.responses import JSONResponse, PlainTextResponse

from lint_engine.config import load_config
from lint_engine.errors import (
    LintError, ParseFailureError, ParserConfigurationError, UnsupportedLanguageError
)
from lint_engine.linter import Linter
from lint_engine.metrics import LintMetrics
from lint_engine.schema import diagnostics_to_json, failure_to_diagnostic, failure_to_json

from .models import DiagnosticModel, ErrorResponse, HealthResponse, LintRequest
from .settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

# HTTP status for each engine failure kind
FAILURE_STATUS = {
    UnsupportedLanguageError: 400,
    ParseFailureError: 422,
    ParserConfigurationError: 500,
}


def _status_for(error: LintError) -> int:
    for error_type, status in FAILURE_STATUS.items():
        if isinstance(error, error_type):
            return status
    return 500


def create_app(linter: Optional[Linter] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Each app owns one ``Linter`` and therefore one ``LintMetrics`` handle;
    tests pass their own to observe it.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "lintface service ready, languages: %s",
            ", ".join(app.state.linter.supported_languages()),
        )
        yield

    app = FastAPI(title="lintface - Tree-sitter linting service", lifespan=lifespan)
    app.state.settings = settings
    app.state.linter = linter or Linter(
        metrics=LintMetrics(),
        config=load_config(settings.config_path),
    )

    @app.get("/health", response_model=HealthResponse)
    def health(request: Request):
        return HealthResponse(languages=request.app.state.linter.supported_languages())

    @app.post(
        "/lint",
        response_model=List[DiagnosticModel],
        responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def lint_code(req: LintRequest, request: Request):
        """Lint a source string and return its diagnostics in traversal order."""
        active: Linter = request.app.state.linter
        start_time = time.perf_counter()

        try:
            diagnostics = await run_in_threadpool(active.lint, req.language, req.code)
        except LintError as e:
            if request.app.state.settings.legacy_envelope:
                return JSONResponse(status_code=200, content=[failure_to_diagnostic(e)])
            return JSONResponse(status_code=_status_for(e), content=failure_to_json(e))

        duration_ms = int((time.perf_counter() - start_time) * 1000)
        logger.info(
            "[lint] language=%s diagnostics=%d duration_ms=%d",
            req.language, len(diagnostics), duration_ms,
        )
        return diagnostics_to_json(diagnostics)

    @app.get("/metrics", response_class=PlainTextResponse)
    def metrics(request: Request):
        return PlainTextResponse(
            request.app.state.linter.metrics.render_prometheus(),
            media_type="text/plain; version=0.0.4",
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("lint_service.main:app", host=default_settings.host, port=default_settings.port)
