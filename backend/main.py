import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.core import config
from backend.core.logging_config import setup_logging
from backend.create_default_admin import provision_default_admin
from backend.routes import admin_routes, auth_routes, chat_routes, content_routes, fact_check_routes
from backend.storage import Storage

logger = logging.getLogger(__name__)


def first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return 'Invalid request'

    error = errors[0]
    location = [str(part) for part in error.get('loc', ()) if part != 'body']
    if error.get('type') == 'missing':
        return f'{location[-1]} is required' if location else 'Request body is required'

    if error.get('type') == 'value_error':
        cause = (error.get('ctx') or {}).get('error')
        return str(cause) if cause else error.get('msg', '').removeprefix('Value error, ')
    return error.get('msg', 'Invalid request')


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={'message': exc.detail},
            headers=getattr(exc, 'headers', None),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={'message': first_validation_message(exc)},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception('Unhandled error on %s %s', request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={'message': 'Internal server error'},
        )


def create_storage() -> Storage:
    storage = Storage(config.DATABASE_URL, seed_sample_data=config.SEED_SAMPLE_DATA)
    if config.DEFAULT_ADMIN_PASSWORD:
        provision_default_admin(
            storage,
            email=config.DEFAULT_ADMIN_EMAIL,
            username=config.DEFAULT_ADMIN_USERNAME,
            password=config.DEFAULT_ADMIN_PASSWORD,
        )
    return storage


def create_app(storage: Storage | None = None) -> FastAPI:
    setup_logging(config.LOG_LEVEL)
    config.validate_runtime_config()

    app = FastAPI(title='SautiCheck API')
    app.state.storage = storage or create_storage()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_error_handlers(app)

    @app.get('/')
    def root():
        return {'status': 'SautiCheck API Running'}

    app.include_router(auth_routes.router, prefix='/api/auth')
    app.include_router(content_routes.router, prefix='/api')
    app.include_router(fact_check_routes.router, prefix='/api')
    app.include_router(chat_routes.router, prefix='/api')
    app.include_router(admin_routes.router, prefix='/api/admin')

    return app


app = create_app()
