from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gzipkit.models.common import CompressionLevel, Extension


class Settings(BaseSettings):
    """إعدادات الأداة العامة مع تحميل القيم من متغيرات البيئة أو ملف .env عند توفره."""

    model_config = SettingsConfigDict(
        env_prefix="GZIPKIT_",
        env_file=Path(__file__).resolve().parents[2] / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "gzipkit"
    app_version: str = "0.1.0"

    base_dir: Path = Field(default_factory=lambda: Path(__file__).resolve().parents[2])
    # الواجهة البرمجية لا تقرأ ولا تكتب إلا داخل هذا المجلد
    root_dir: Optional[Path] = None

    # حجم الكتلة المقروءة من الملف المصدر في كل دورة
    chunk_size: int = Field(default=1024, gt=0)
    flush_each_chunk: bool = True
    embed_mtime: bool = False

    default_level: CompressionLevel = CompressionLevel.optimal
    default_extension: Extension = Extension.gz

    log_level: str = "INFO"

    allow_origins: list[str] = Field(default_factory=list)

    @field_validator("default_level", mode="before")
    @classmethod
    def parse_level(cls, value):
        return CompressionLevel.parse(value)

    @field_validator("default_extension", mode="before")
    @classmethod
    def parse_extension(cls, value):
        return Extension.parse(value)

    def api_root(self) -> Path:
        """مجلد العمل المسموح به للواجهة البرمجية، ويُنشأ عند غيابه."""
        root = (self.root_dir or (self.base_dir / "storage")).expanduser().resolve()
        root.mkdir(parents=True, exist_ok=True)
        return root


@lru_cache()
def get_settings() -> Settings:
    return Settings()
