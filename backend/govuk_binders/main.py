import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from govuk_binders import config
from govuk_binders.routers import forms, health

app = FastAPI(title="GOV.UK Form Binders API", version="0.1.0")
logging.getLogger("govuk").setLevel(config.LOG_LEVEL)

# Allow local/dev origins for form previews.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(forms.router)
