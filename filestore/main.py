from fastapi import Depends, FastAPI
from filestore.api.dependencies import get_language_code, get_service_context
from filestore.core.logging import setup_logging
from filestore.models.common import LanguageCode
from filestore.models.context import ServiceContext

setup_logging()

app = FastAPI(
    title="File-backed collection store",
    version="1.0.0",
)

@app.get("/health")
def health(
    context: ServiceContext = Depends(get_service_context),
    language: LanguageCode = Depends(get_language_code),
):
    return {"ok": True, "persistent": context.persistent, "language": language}
