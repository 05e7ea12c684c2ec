from dotenv import load_dotenv
from fastapi import FastAPI
from pipeline_feedback.config import load_settings
from pipeline_feedback.errors import ConfigurationError
from pipeline_feedback.logging_config import configure_logging
from .routes import router

load_dotenv()

try:
    debug = load_settings().APP_DEBUG
except ConfigurationError:
    # /analyze reports invalid settings on every request
    debug = False

configure_logging(debug)
app = FastAPI(title="Pipeline Feedback API", version="0.1.0",
    docs_url="/swagger",
    redoc_url=None,)
app.include_router(router)
