# app/main.py

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.config import load_settings
from app.models import Rejected
import app.exceptions as ex
from app.validator import decode_body, validate_payload

from app.logger import configure_logging, get_logger
configure_logging()

log = get_logger(__name__)
settings = load_settings()
log.info(f"FastAPI application is starting ({settings.app_env})...")


app = FastAPI(title="Product Updated Sink",
              description="Receives product-updated integration events, validates them strictly and acknowledges receipt.",
              version="1.0.0")


@app.post(settings.product_updated_route, status_code=202)
async def product_updated(request: Request):
  """
  Validate a product-updated event and acknowledge it.
  The service is a sink: accepted events are logged and dropped.
  """
  log.info("Received product-updated event")
  body = decode_body(await request.body())

  result = validate_payload(body)
  if isinstance(result, Rejected):
    raise ex.PayloadValidationError(result.errors)

  log.info("Product updated: %s", result.event.model_dump(by_alias=True))
  return {"message": "accepted"}


@app.get("/")
def root():
  return {"messages": f"Product Updated Sink - endpoints: POST {settings.product_updated_route}, GET /health"}


@app.get("/health")
def healthcheck():
  return {"status": "ok"}


@app.exception_handler(ex.MalformedBodyError)
async def malformed_body_handler(request: Request, exc: ex.MalformedBodyError):
  log.warning(f"Invalid JSON body: {exc.__cause__}")
  return JSONResponse(
    status_code=400,
    content={"error": "Invalid JSON body"},
  )


@app.exception_handler(ex.PayloadValidationError)
async def validation_error_handler(request: Request, exc: ex.PayloadValidationError):
  log.warning(f"Validation failed: {exc.details}")
  return JSONResponse(
    status_code=400,
    content={"error": "ValidationError", "details": exc.details},
  )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
  log.error(f"Unhandled exception: {exc}", exc_info=True)
  return JSONResponse(
    status_code=500,
    content={"detail": "Internal Server Error"},
  )
