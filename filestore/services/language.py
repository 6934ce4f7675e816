from __future__ import annotations
from typing import Optional
from filestore.core.logging import get_logger
from filestore.models.common import LanguageCode

logger = get_logger(__name__)

def resolve_language_code(
    requested: Optional[str],
    configured: Optional[str],
    default: Optional[LanguageCode] = None,
) -> LanguageCode:
    """
    Pick the effective language, highest priority first:
    - requested: explicit per-call / per-request override
    - configured: per-service default from the service context
    - default: system-wide default (LanguageCode.default() if not given)
    Invalid tags are logged and skipped.
    """
    for source, tag in (("requested", requested), ("configured", configured)):
        if tag is None or not tag.strip():
            continue
        code = LanguageCode.parse(tag)
        if code is not None:
            logger.debug("resolve_language_code(): using %s language %s", source, code.value)
            return code
        logger.warning("resolve_language_code(): %s language tag %r is not supported, ignoring it", source, tag)

    code = default or LanguageCode.default()
    logger.debug("resolve_language_code(): falling back to default language %s", code.value)
    return code
