from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Generic, Iterable, List, Optional, Type, TypeVar

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from filestore.core.config import settings
from filestore.core.logging import get_logger
from filestore.models.common import LanguageCode
from filestore.models.context import LANGUAGE_CODE_PARAM, ServiceContext
from filestore.services.language import resolve_language_code
from filestore.services.serialization import JsonListSerializer, Serializer

T = TypeVar("T")

logger = get_logger(__name__)

class FileServiceProvider(Generic[T]):
    """
    JSON file persistence for one resource kind, without a DB.

    Layout: <base_dir>/<prefix>/data.json holds the persisted records,
    <base_dir>/<prefix>/seed.json is the template used when data.json is missing.
    The provider holds no records itself; callers keep the list in memory
    and call export_json() whenever they want it written back.
    Last writer wins: there is no locking.
    """

    def __init__(
        self,
        context: ServiceContext,
        prefix: str,
        item_type: Type[T] | Any = dict,
        serializer: Optional[Serializer[T]] = None,
    ):
        self.context = context
        self.persistent = context.persistent
        self.data_path: Path = context.resolve(prefix, settings.data_filename)
        self.seed_path: Path = context.resolve(prefix, settings.seed_filename)
        self.serializer: Serializer[T] = serializer or JsonListSerializer(item_type)
        self.language_code: Optional[LanguageCode] = None

    @classmethod
    def from_paths(
        cls,
        data_path: Path | str,
        seed_path: Path | str,
        item_type: Type[T] | Any = dict,
        persistent: bool = True,
        serializer: Optional[Serializer[T]] = None,
        context: Optional[ServiceContext] = None,
    ) -> "FileServiceProvider[T]":
        data_path = Path(data_path)
        ctx = context or ServiceContext(base_dir=data_path.parent, persistent=persistent)
        provider = cls(ctx, "", item_type=item_type, serializer=serializer)
        provider.persistent = persistent
        provider.data_path = data_path
        provider.seed_path = Path(seed_path)
        return provider

    # ---------- Import ----------
    def import_json(self, path: Path | str | None = None) -> List[T]:
        """
        With a path: decode that file.
        Without: read data.json, or seed it from seed.json if it does not exist yet.
        Always returns a list; missing or broken files give [].
        """
        if not self.persistent:
            return []
        if path is not None:
            return self._read(Path(path))

        if self.data_path.exists():
            logger.info("persistent data in file %s exists.", self.data_path.name)
            items = self._read(self.data_path)
        else:
            logger.info(
                "persistent data in file %s is missing -> trying to seed from %s",
                self.data_path.name, self.seed_path.name,
            )
            items = self._read(self.seed_path)
            self._seed(items)

        logger.info("import_json(): imported %d objects", len(items))
        return items

    def _read(self, path: Path) -> List[T]:
        logger.info("import_json(%s): importing data", path.name)
        if not path.exists():
            logger.warning("import_json(%s): file does not exist.", path.name)
            return []
        if not path.is_file() or not os.access(path, os.R_OK):
            logger.warning("import_json(%s): file is not readable", path.name)
            return []

        try:
            with path.open("rb") as f:
                items = self.serializer.decode(f)
        except OSError:
            logger.error("import_json(%s): could not read the file.", path.name, exc_info=True)
            return []
        except ValidationError as e:
            logger.error("import_json(%s): invalid json data: %s", path.name, e)
            return []

        logger.info("import_json(%s): %d objects imported.", path.name, len(items))
        return items

    def _seed(self, items: List[T]) -> bool:
        try:
            self.data_path.touch(exist_ok=True)
        except OSError:
            logger.error("import_json(): IO exception when creating file %s", self.data_path, exc_info=True)
            return False
        return self.export_json(items)

    # ---------- Export ----------
    def export_json(self, values: Iterable[T]) -> bool:
        """Overwrite data.json with values. Returns False if nothing was written."""
        if not self.persistent:
            return False
        logger.info("export_json(%s): exporting objects in json format", self.data_path.name)
        # encode first so a bad record never truncates the existing file
        try:
            payload = self.serializer.encode(values)
        except PydanticSerializationError as e:
            logger.error("export_json(%s): could not encode objects: %s", self.data_path.name, e)
            return False
        try:
            with self.data_path.open("wb") as f:
                f.write(payload)
        except OSError:
            logger.error("export_json(%s): could not write the file.", self.data_path, exc_info=True)
            return False
        return True

    # ---------- Language ----------
    def set_language_code(
        self,
        requested: Optional[str] = None,
        context: Optional[ServiceContext] = None,
    ) -> LanguageCode:
        """
        Resolve the language once and keep it for the lifetime of this provider.
        Later calls return the cached value, whatever they pass, until
        reset_language_code() is called.
        """
        if self.language_code is not None:
            return self.language_code
        ctx = context or self.context
        self.language_code = resolve_language_code(requested, ctx.get_init_parameter(LANGUAGE_CODE_PARAM))
        logger.info("set_language_code(): language set to %s", self.language_code.value)
        return self.language_code

    def reset_language_code(self) -> None:
        self.language_code = None
