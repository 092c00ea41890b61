import glob
import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

from gzipkit.core.errors import NotAFile, OutsideRoot, UnmatchedPattern


def expand_pattern(pattern: str) -> List[Path]:
    """توسيع نمط واحد إلى مسارات مطلقة؛ المسار الموجود فعلًا يؤخذ حرفيًا قبل التوسيع."""
    expanded = os.path.expanduser(pattern)
    if os.path.lexists(expanded):
        return [Path(expanded).absolute()]
    return [Path(match).absolute() for match in sorted(glob.glob(expanded))]


def anchor(path: str, root: Path) -> str:
    """المسارات النسبية تُفسَّر داخل المجلد الجذر."""
    return str(root / path)


def ensure_within(path: Path, root: Path) -> Path:
    resolved = path.resolve()
    if not resolved.is_relative_to(root.resolve()):
        raise OutsideRoot(f"المسار خارج المجلد المسموح به: {path}", path)
    return resolved


def resolve_inputs(
    patterns: Iterable[str],
    on_unmatched: Optional[Callable[[UnmatchedPattern], None]] = None,
    root: Optional[Path] = None,
) -> List[Path]:
    """
    التحقق من كل الأنماط قبل بدء الضغط وإرجاع الملفات بالترتيب.
    النمط غير المطابق يُبلغ عنه ويستمر التحقق، أما المسار الذي ليس ملفًا فيوقف كل شيء.
    عند تحديد root يُرفض أي تطابق يقع خارجه قبل أي فحص آخر.
    """
    resolved: List[Path] = []
    for pattern in patterns:
        if root is not None:
            pattern = anchor(pattern, root)
        matches = expand_pattern(pattern)
        if not matches:
            error = UnmatchedPattern(f"لم يتم العثور على ملف يطابق: {pattern}", pattern)
            if on_unmatched is None:
                raise error
            on_unmatched(error)
            continue

        for match in matches:
            if root is not None:
                ensure_within(match, root)
            if not match.is_file():
                raise NotAFile(f"المسار ليس ملفًا: {match}", match)
            resolved.append(match)

    return resolved


def file_stats(path: Path) -> Tuple[int, str]:
    """إرجاع حجم الملف بالبَيت ونوعه البسيط للاستخدام في التقارير."""
    size = path.stat().st_size if path.exists() else 0
    suffix = path.suffix.lower().lstrip(".")
    return size, suffix or "bin"


def human_size(num_bytes: int) -> str:
    suffixes = ["B", "KB", "MB", "GB", "TB"]
    value = float(num_bytes)
    for suffix in suffixes:
        if value < 1024 or suffix == suffixes[-1]:
            return f"{value:.2f} {suffix}"
        value /= 1024
    return f"{value:.2f} TB"
