import glob
import os
import re
from pathlib import Path
from typing import Optional

from gzipkit.core.errors import InvalidDestination
from gzipkit.core.logging import configure_logging
from gzipkit.models import DestinationDecision

_PROVIDER_PATH = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]+://")


class DestinationResolver:
    """تحديد مجلد الحفظ مرة واحدة لكل تنفيذ قبل فتح أي ملف."""

    def __init__(self) -> None:
        self.logger = configure_logging()

    def resolve(self, path: Optional[str]) -> DestinationDecision:
        if path is None or not str(path).strip():
            self.logger.debug("لم يحدد مجلد للحفظ، سيتم الحفظ بجوار كل ملف مصدر.")
            return DestinationDecision()

        raw = str(path).strip()
        if _PROVIDER_PATH.match(raw):
            raise InvalidDestination(f"مجلد الحفظ ليس مسارًا محليًا: {raw}", raw)

        expanded = os.path.expanduser(raw)
        matches = self._matches(expanded)
        # نمط يطابق مسارات موجودة لا يُنشأ حرفيًا
        if not os.path.isdir(expanded) and (not matches or matches == [expanded]):
            self._create(expanded)
            matches = self._matches(expanded)

        if not matches:
            raise InvalidDestination(f"تعذر الوصول إلى مجلد الحفظ: {raw}", raw)
        if len(matches) > 1:
            raise InvalidDestination(
                f"مجلد الحفظ يطابق أكثر من مسار ({len(matches)}): {raw}",
                raw,
            )

        directory = Path(matches[0]).resolve()
        if not directory.is_dir():
            raise InvalidDestination(f"مجلد الحفظ ليس مجلدًا على نظام الملفات المحلي: {directory}", raw)

        self.logger.debug("مجلد الحفظ: %s", directory)
        return DestinationDecision(directory=directory)

    # ------------------------------------------------------------------
    def _create(self, path: str) -> None:
        # فشل الإنشاء لا يوقف التنفيذ؛ خطوة الحل التالية هي التي ترفض المسار
        try:
            os.makedirs(path, exist_ok=True)
            self.logger.info("تم إنشاء مجلد الحفظ: %s", path)
        except OSError as exc:
            self.logger.error("تعذر إنشاء مجلد الحفظ %s: %s", path, exc)

    @staticmethod
    def _matches(path: str) -> list[str]:
        if os.path.exists(path):
            return [path]
        return glob.glob(path)
