from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FILESTORE_", env_file=".env", extra="ignore")

    base_dir: str = Field(default=".", description="Base directory that resource prefixes resolve against")
    persistent: bool = Field(default=True, description="Read/write data files; False keeps every collection in memory")
    default_language: Optional[str] = Field(default=None, description="Per-service default language tag", examples=["DE"])
    data_filename: str = Field(default="data.json", description="Persistent data file name")
    seed_filename: str = Field(default="seed.json", description="Seed template file name")
    log_level: str = Field(default="INFO", description="Level for the filestore logger", examples=["DEBUG"])

settings = Settings()
