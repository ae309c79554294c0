from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware

from bar_admin.db import settings
from bar_admin.observability import RequestLoggingMiddleware
from bar_admin.routers import bars_admin, options_admin

app = FastAPI(title="Bar Admin API")

ALLOWED_ORIGINS = [
    # Dev - Next
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

cors_origins = settings.CORS_ALLOWED_ORIGINS_LIST or ALLOWED_ORIGINS
trusted_hosts = settings.TRUSTED_HOSTS_LIST

if trusted_hosts:
    app.add_middleware(TrustedHostMiddleware, allowed_hosts=trusted_hosts)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_methods=["*"], allow_headers=["*"], allow_credentials=True,
)
app.add_middleware(RequestLoggingMiddleware)

@app.get("/health")
def health(): return {"ok": True}

app.include_router(bars_admin.router)
app.include_router(options_admin.router)
