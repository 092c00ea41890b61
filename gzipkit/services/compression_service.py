from __future__ import annotations

import gzip
import zlib
from pathlib import Path
from typing import IO, Iterable, Optional

from gzipkit.core.config import Settings, get_settings
from gzipkit.core.errors import CompressionFailure, RecoverableError, SkippedExists
from gzipkit.core.logging import configure_logging
from gzipkit.models import (
    BatchReport,
    CompressionJob,
    CompressionLevel,
    CompressionResult,
    DestinationDecision,
    Extension,
    ItemError,
    JobStatus,
)
from gzipkit.storage.local import DestinationResolver
from gzipkit.utils.file_utils import anchor, ensure_within, file_stats, resolve_inputs


class CompressionService:
    """ضغط الملفات واحدًا تلو الآخر إلى صيغة gzip القياسية مع قراءة متدفقة على شكل كتل."""

    def __init__(
        self,
        settings: Settings | None = None,
        resolver: DestinationResolver | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.resolver = resolver or DestinationResolver()
        self.logger = configure_logging()

    # ------------------------------------------------------------------
    # تنفيذ دفعة كاملة
    # ------------------------------------------------------------------
    def run(
        self,
        patterns: Iterable[str],
        destination: Optional[str] = None,
        level: CompressionLevel | str = CompressionLevel.optimal,
        extension: Extension | str = Extension.gz,
        force: bool = False,
        dry_run: bool = False,
        root: Optional[Path] = None,
    ) -> BatchReport:
        """
        تنفيذ دفعة كاملة: تحديد مجلد الحفظ مرة واحدة، ثم التحقق من كل المدخلات، ثم الضغط بالترتيب.
        عند تحديد root تُفسَّر المسارات النسبية داخله ويُرفض أي مسار يخرج عنه قبل إنشاء أي مجلد.
        """
        level = CompressionLevel.parse(level)
        extension = Extension.parse(extension)
        report = BatchReport()

        if root is not None and destination and destination.strip():
            destination = anchor(destination.strip(), root)
            ensure_within(Path(destination), root)

        decision = self.resolver.resolve(destination)
        if root is not None and decision.directory is not None:
            ensure_within(decision.directory, root)

        sources = resolve_inputs(
            patterns,
            on_unmatched=lambda error: self._record(report, error),
            root=root,
        )

        for source in sources:
            job = self.plan_job(source, decision, extension, level, force)
            if dry_run:
                self.logger.debug("(تجربة) %s -> %s", job.source, job.destination)
                report.results.append(
                    CompressionResult(source=job.source, destination=job.destination, status=JobStatus.planned)
                )
                continue
            try:
                report.results.append(self.compress(job))
            except RecoverableError as error:
                self._record(report, error)

        return report

    @staticmethod
    def plan_job(
        source: Path,
        decision: DestinationDecision,
        extension: Extension,
        level: CompressionLevel,
        force: bool,
    ) -> CompressionJob:
        target = decision.directory_for(source) / f"{source.name}.{extension.value}"
        return CompressionJob(source=source, destination=target, level=level, force=force)

    # ------------------------------------------------------------------
    # ضغط ملف واحد
    # ------------------------------------------------------------------
    def compress(self, job: CompressionJob) -> CompressionResult:
        if job.destination.exists() and not job.force:
            raise SkippedExists(
                f"الملف الناتج موجود مسبقًا (استخدم --force للاستبدال): {job.destination}",
                job.destination,
            )

        self.logger.debug("ضغط %s -> %s (المستوى %s)", job.source, job.destination, job.level.value)

        encoder: Optional[gzip.GzipFile] = None
        source: Optional[IO[bytes]] = None
        target: Optional[IO[bytes]] = None
        try:
            source = job.source.open("rb")
            try:
                target = job.destination.open("wb" if job.force else "xb")
            except FileExistsError:
                raise SkippedExists(
                    f"الملف الناتج أنشئ أثناء التنفيذ: {job.destination}",
                    job.destination,
                ) from None
            encoder = gzip.GzipFile(
                filename="",
                mode="wb",
                compresslevel=job.level.zlib_level,
                fileobj=target,
                mtime=None if self.settings.embed_mtime else 0,
            )

            chunk_size = self.settings.chunk_size
            while True:
                chunk = source.read(chunk_size)
                if not chunk:
                    break
                encoder.write(chunk)
                if self.settings.flush_each_chunk:
                    encoder.flush()

            encoder.close()
            source.close()
            target.close()
        except (OSError, zlib.error) as exc:
            raise CompressionFailure(f"فشل ضغط الملف {job.source}: {exc}", job.source) from exc
        finally:
            self._release(encoder, "المرمّز", job)
            self._release(source, "الملف المصدر", job)
            self._release(target, "الملف الناتج", job)

        original_size, _ = file_stats(job.source)
        compressed_size, _ = file_stats(job.destination)
        self.logger.debug("تم ضغط %s -> %s", job.source, job.destination)
        return CompressionResult(
            source=job.source,
            destination=job.destination,
            original_size=original_size,
            compressed_size=compressed_size,
        )

    # ------------------------------------------------------------------
    def _release(self, handle, label: str, job: CompressionJob) -> None:
        if handle is None:
            return
        try:
            handle.close()
        except OSError as exc:
            self.logger.error("تعذر إغلاق %s أثناء ضغط %s: %s", label, job.source, exc)

    def _record(self, report: BatchReport, error: RecoverableError) -> None:
        self.logger.warning(error.message)
        report.errors.append(ItemError(kind=type(error).__name__, path=str(error.path), message=error.message))
