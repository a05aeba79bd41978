"""
Consistency check between canonical photo records and the gallery-photos index.
"""

from typing import Dict, List

from pydantic import BaseModel, Field

from core.logging import get_logger
from repositories import GalleriesRepository, PhotosRepository

logger = get_logger(__name__)


class GalleryIndexReport(BaseModel):
    gallery_id: str
    code: str
    canonical_count: int = 0
    index_count: int = 0
    missing_index: List[str] = Field(default_factory=list, description="Canonical names without index record")
    orphan_index: List[str] = Field(default_factory=list, description="Index record ids without canonical record")
    duplicate_names: List[str] = Field(default_factory=list, description="Names shared by several canonical photos")

    @property
    def is_consistent(self) -> bool:
        return not (self.missing_index or self.orphan_index or self.duplicate_names)


async def check_gallery_index(
    galleries_repo: GalleriesRepository,
    photos_repo: PhotosRepository,
) -> List[GalleryIndexReport]:
    """Compare both photo collections for every gallery, active or not."""
    reports = []

    for gallery in await galleries_repo.list_galleries(include_inactive=True):
        photos = await photos_repo.list_for_gallery(gallery.id)
        index = await photos_repo.list_index_for_gallery(gallery.id)

        names: Dict[str, int] = {}
        for photo in photos:
            names[photo.name] = names.get(photo.name, 0) + 1
        indexed_names = {record.name for record in index}

        report = GalleryIndexReport(
            gallery_id=gallery.id,
            code=gallery.code,
            canonical_count=len(photos),
            index_count=len(index),
            missing_index=sorted(name for name in names if name not in indexed_names),
            orphan_index=sorted(record.id for record in index if record.name not in names),
            duplicate_names=sorted(name for name, count in names.items() if count > 1),
        )
        if not report.is_consistent:
            logger.warning(
                f"Gallery {gallery.code}: {len(report.missing_index)} missing, "
                f"{len(report.orphan_index)} orphan, {len(report.duplicate_names)} duplicate names"
            )
        reports.append(report)

    return reports
