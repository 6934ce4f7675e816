from __future__ import annotations
from pathlib import Path
from typing import Dict, Optional
from pydantic import BaseModel, Field

from filestore.core.config import Settings

LANGUAGE_CODE_PARAM = "languageCode"

class ServiceContext(BaseModel):
    """
    What a file-backed service needs from its host:
    - base_dir: absolute directory the resource prefixes live under
    - persistent: whether data files are read/written at all
    - init_params: service initialisation parameters (e.g. languageCode)
    """
    base_dir: Path
    persistent: bool = True
    init_params: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_settings(cls, s: Settings) -> "ServiceContext":
        params: Dict[str, str] = {}
        if s.default_language:
            params[LANGUAGE_CODE_PARAM] = s.default_language
        return cls(
            base_dir=Path(s.base_dir).resolve(),
            persistent=s.persistent,
            init_params=params,
        )

    def get_init_parameter(self, name: str) -> Optional[str]:
        return self.init_params.get(name)

    def resolve(self, prefix: str, filename: str) -> Path:
        return self.base_dir / prefix.strip("/") / filename
