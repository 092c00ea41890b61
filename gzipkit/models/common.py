from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict


class JobStatus(str, Enum):
    completed = "completed"
    planned = "planned"
    skipped = "skipped"
    unmatched = "unmatched"


class CompressionLevel(str, Enum):
    fastest = "fastest"
    no_compression = "no_compression"
    optimal = "optimal"

    @property
    def zlib_level(self) -> int:
        return _ZLIB_LEVELS[self]

    @classmethod
    def parse(cls, value: "str | CompressionLevel") -> "CompressionLevel":
        """قبول القيم بأي حالة أحرف وبالصيغة المدمجة مثل NoCompression."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("-", "").replace("_", "")
        for member in cls:
            if member.value.replace("_", "") == normalized:
                return member
        raise ValueError(f"مستوى الضغط غير مدعوم: {value}. الخيارات المتاحة: {', '.join(m.value for m in cls)}.")


_ZLIB_LEVELS = {
    CompressionLevel.fastest: 1,
    CompressionLevel.no_compression: 0,
    CompressionLevel.optimal: 6,
}


class Extension(str, Enum):
    gz = "gz"
    gzip = "gzip"

    @classmethod
    def parse(cls, value: "str | Extension") -> "Extension":
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().lstrip(".")
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"الامتداد غير مدعوم: {value}. الخيارات المتاحة: gz, gzip.") from None


class DestinationDecision(BaseModel):
    """قرار مكان الحفظ: مجلد واحد مطلق، أو None لاستخدام مجلد كل ملف مصدر."""

    model_config = ConfigDict(frozen=True)

    directory: Optional[Path] = None

    @property
    def per_source(self) -> bool:
        return self.directory is None

    def directory_for(self, source: Path) -> Path:
        return self.directory if self.directory is not None else source.parent
