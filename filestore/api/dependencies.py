from functools import lru_cache
from typing import Optional
from fastapi import Depends, Query

from filestore.core.config import settings
from filestore.models.common import LanguageCode
from filestore.models.context import LANGUAGE_CODE_PARAM, ServiceContext
from filestore.services.language import resolve_language_code

@lru_cache
def get_service_context() -> ServiceContext:
    return ServiceContext.from_settings(settings)

def get_language_code(
    lang: Optional[str] = Query(default=None, description="Language override", examples=["DE"]),
    context: ServiceContext = Depends(get_service_context),
) -> LanguageCode:
    # per request, unlike FileServiceProvider.set_language_code which is sticky
    return resolve_language_code(lang, context.get_init_parameter(LANGUAGE_CODE_PARAM))
