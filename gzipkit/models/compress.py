from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import CompressionLevel, Extension, JobStatus


class CompressionJob(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: Path
    destination: Path
    level: CompressionLevel = CompressionLevel.optimal
    force: bool = False


class CompressionResult(BaseModel):
    source: Path
    destination: Path
    status: JobStatus = JobStatus.completed
    original_size: int = 0
    compressed_size: int = 0

    @property
    def reduction_bytes(self) -> int:
        return max(0, self.original_size - self.compressed_size)

    @property
    def reduction_percent(self) -> float:
        if not self.original_size:
            return 0
        return round((self.reduction_bytes / self.original_size) * 100, 2)

    def to_card(self) -> dict:
        return {
            "source": str(self.source),
            "destination": str(self.destination),
            "status": self.status.value,
            "original_size": self.original_size,
            "compressed_size": self.compressed_size,
            "reduction_bytes": self.reduction_bytes,
            "reduction_percent": self.reduction_percent,
        }


class ItemError(BaseModel):
    kind: str
    path: str
    message: str


class BatchReport(BaseModel):
    results: List[CompressionResult] = Field(default_factory=list)
    errors: List[ItemError] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def errors_of(self, kind: str) -> List[ItemError]:
        return [error for error in self.errors if error.kind == kind]


class CompressionRequest(BaseModel):
    paths: List[str] = Field(..., min_length=1, description="مسارات الملفات أو أنماط البحث المراد ضغطها.")
    destination: Optional[str] = Field(default=None, description="مجلد الحفظ (اختياري، الافتراضي مجلد كل ملف).")
    level: CompressionLevel = Field(CompressionLevel.optimal, description="مستوى الضغط.")
    extension: Extension = Field(Extension.gz, description="امتداد الملف الناتج (gz | gzip).")
    force: bool = Field(False, description="السماح باستبدال الملفات الموجودة.")
    dry_run: bool = Field(False, description="عرض الخطة دون كتابة أي ملف.")

    @field_validator("level", mode="before")
    @classmethod
    def parse_level(cls, value):
        return CompressionLevel.parse(value)

    @field_validator("extension", mode="before")
    @classmethod
    def parse_extension(cls, value):
        return Extension.parse(value)
