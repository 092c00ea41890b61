"""واجهة سطر الأوامر لضغط الملفات إلى أرشيفات gzip."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, TextIO

from pydantic import ValidationError

from gzipkit.core.config import get_settings
from gzipkit.core.errors import TerminatingError
from gzipkit.core.logging import configure_logging
from gzipkit.models import BatchReport, CompressionLevel, Extension, JobStatus
from gzipkit.services.compression_service import CompressionService
from gzipkit.utils.file_utils import human_size

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_PARTIAL = 3


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="gzipkit",
        description=(
            "ضغط الملفات إلى أرشيفات gzip. "
            "تقبل المسارات أنماط البحث ويمكن تمريرها عبر الإدخال القياسي، مسار في كل سطر."
        ),
    )
    parser.add_argument("paths", nargs="*", help="الملفات أو أنماط البحث المراد ضغطها")
    parser.add_argument(
        "-d",
        "--destination",
        default="",
        help="مجلد حفظ الأرشيفات (يُنشأ عند غيابه)؛ الافتراضي مجلد كل ملف مصدر",
    )
    parser.add_argument(
        "-l",
        "--compression-level",
        type=CompressionLevel.parse,
        default=settings.default_level,
        metavar="{fastest,no_compression,optimal}",
        help="مستوى الضغط المطبق على كل الملفات",
    )
    parser.add_argument(
        "-e",
        "--extension",
        type=Extension.parse,
        default=settings.default_extension,
        metavar="{gz,gzip}",
        help="الامتداد المضاف إلى اسم كل أرشيف",
    )
    parser.add_argument("-f", "--force", action="store_true", help="استبدال الأرشيفات الموجودة")
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="عرض الأرشيفات التي ستُنشأ دون كتابتها",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="تسجيل تقدم العمل لكل ملف")
    return parser


def read_piped_paths(stream: TextIO) -> list[str]:
    if stream is None or stream.isatty():
        return []
    return [line.strip() for line in stream if line.strip()]


def format_rows(report: BatchReport) -> Iterable[str]:
    for result in report.results:
        if result.status is JobStatus.planned:
            yield f"سيتم إنشاء {result.destination}"
            continue
        yield (
            f"{result.destination}  {human_size(result.original_size)} -> "
            f"{human_size(result.compressed_size)} (تقليص {result.reduction_percent:.1f}%)"
        )


def main(argv: list[str] | None = None, stdin: TextIO | None = None) -> int:
    try:
        parser = build_parser()
    except ValidationError as exc:
        print(f"gzipkit: إعدادات غير صالحة:\n{exc}", file=sys.stderr)
        return EXIT_USAGE
    args = parser.parse_args(argv)

    # التحذيرات والأخطاء تمر عبر المسجل فقط؛ stdout مخصص للنتائج
    logger = configure_logging(logging.DEBUG if args.verbose else get_settings().log_level.upper())

    paths = args.paths or read_piped_paths(sys.stdin if stdin is None else stdin)
    if not paths:
        parser.error("يجب تحديد مسار واحد على الأقل (كوسيط أو عبر الإدخال القياسي)")

    service = CompressionService()
    try:
        report = service.run(
            paths,
            destination=args.destination,
            level=args.compression_level,
            extension=args.extension,
            force=args.force,
            dry_run=args.dry_run,
        )
    except TerminatingError as error:
        logger.error(error.message)
        return EXIT_FAILURE

    for row in format_rows(report):
        print(row)

    written = [r for r in report.results if r.status is JobStatus.completed]
    if written:
        print(
            f"\nتم ضغط {len(written)} ملف: "
            f"{human_size(sum(r.original_size for r in written))} -> "
            f"{human_size(sum(r.compressed_size for r in written))}"
        )

    return EXIT_OK if report.ok else EXIT_PARTIAL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
