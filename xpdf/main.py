import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from xpdf import config
from xpdf.routers import analysis

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Room for multipart boundaries and part headers; read_upload checks the file itself exactly
MULTIPART_OVERHEAD_BYTES = 64 * 1024


class UploadSizeLimitMiddleware(BaseHTTPMiddleware):
    """Rejects bodies whose Content-Length is over the upload limit before reading them."""

    def __init__(self, app, max_size: int | None = None):
        super().__init__(app)
        self.max_size = max_size or config.MAX_UPLOAD_BYTES + MULTIPART_OVERHEAD_BYTES

    async def dispatch(self, request: Request, call_next):
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.max_size:
            logger.warning("Request body too large: %s bytes (max: %d) on %s", content_length, self.max_size, request.url.path)
            return JSONResponse(
                status_code=413,
                content={"detail": f"Request body exceeds maximum size of {self.max_size} bytes"},
            )
        return await call_next(request)


app = FastAPI(title="XPDF Document Explainer API")

app.add_middleware(UploadSizeLimitMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analysis.router)


@app.get("/health")
def health_check():
    return {"status": "ok"}
