from fastapi import APIRouter, HTTPException, status

from gzipkit.core.errors import CompressionFailure, TerminatingError
from gzipkit.core.config import get_settings
from gzipkit.core.logging import configure_logging
from gzipkit.models import CompressionLevel, CompressionRequest, Extension
from gzipkit.services.compression_service import CompressionService

router = APIRouter(prefix="/gzip", tags=["Gzip Compression"])

logger = configure_logging()


def get_service() -> CompressionService:
    return CompressionService()


@router.get("/options", summary="الخيارات المتاحة لمستوى الضغط والامتداد")
async def options() -> dict:
    return {
        "levels": [level.value for level in CompressionLevel],
        "extensions": [extension.value for extension in Extension],
    }


@router.post("/compress", summary="ضغط ملفات على الخادم إلى صيغة gzip وإرجاع تقرير الدفعة")
def compress(payload: CompressionRequest) -> dict:
    try:
        report = get_service().run(
            payload.paths,
            destination=payload.destination,
            level=payload.level,
            extension=payload.extension,
            force=payload.force,
            dry_run=payload.dry_run,
            root=get_settings().api_root(),
        )
    except CompressionFailure as error:
        logger.error(error.message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error.message,
        ) from error
    except TerminatingError as error:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error.message,
        ) from error

    logger.info("اكتملت دفعة ضغط: %d ملف، %d تحذير", len(report.results), len(report.errors))

    return {
        "status": "ok" if report.ok else "partial",
        "results": [result.to_card() for result in report.results],
        "errors": [error.model_dump() for error in report.errors],
        "level": payload.level.value,
        "extension": payload.extension.value,
    }
