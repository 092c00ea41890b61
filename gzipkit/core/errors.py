"""أخطاء الأداة مقسمة إلى أخطاء قابلة للتجاوز (على مستوى عنصر واحد) وأخطاء منهية للتنفيذ."""
from __future__ import annotations

from pathlib import Path


class GzipKitError(Exception):
    """الاستثناء الأساسي لكل أخطاء الأداة، ويحمل المسار المتسبب في الخطأ."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path


class RecoverableError(GzipKitError):
    """خطأ يخص عنصرًا واحدًا؛ يتم الإبلاغ عنه وتستمر الدفعة."""


class TerminatingError(GzipKitError):
    """خطأ يوقف التنفيذ بالكامل ويتخطى العناصر المتبقية."""


class UnmatchedPattern(RecoverableError):
    pass


class SkippedExists(RecoverableError):
    pass


class InvalidDestination(TerminatingError):
    pass


class NotAFile(TerminatingError):
    pass


class CompressionFailure(TerminatingError):
    """فشل قراءة أو كتابة أو ترميز أثناء ضغط ملف."""


class OutsideRoot(TerminatingError):
    """مسار يقع خارج المجلد المسموح به للواجهة البرمجية."""
