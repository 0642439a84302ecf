"""Pydantic request and response models for the HTTP API."""

from pydantic import BaseModel, Field

from photo_triage.domain.photos import PhotoRecord, RecommendMode


class PhotoPayload(BaseModel):
    """Photo metadata as sent by the catalog client."""

    id: str
    location: str = ""
    date_modified: int
    size: int = Field(ge=0)
    width: int = Field(ge=0)
    height: int = Field(ge=0)
    album_name: str | None = None

    def to_record(self) -> PhotoRecord:
        return PhotoRecord(
            id=self.id,
            location=self.location,
            date_modified=self.date_modified,
            size=self.size,
            width=self.width,
            height=self.height,
            album_name=self.album_name,
        )

    @classmethod
    def from_record(cls, photo: PhotoRecord) -> "PhotoPayload":
        return cls(
            id=photo.id,
            location=photo.location,
            date_modified=photo.date_modified,
            size=photo.size,
            width=photo.width,
            height=photo.height,
            album_name=photo.album_name,
        )


class BatchRequest(BaseModel):
    """Request for the next review batch."""

    catalog: list[PhotoPayload] = Field(default_factory=list)
    batch_size: int | None = Field(default=None, ge=1)
    mode: RecommendMode | None = None
    anchor: PhotoPayload | None = None


class BatchResponse(BaseModel):
    mode: RecommendMode
    batch: list[PhotoPayload]


class PreferencesPayload(BaseModel):
    recommend_mode: RecommendMode | None = None
    batch_size: int | None = Field(default=None, ge=1)


class ReviewPayload(BaseModel):
    """Counts reported after finishing a batch."""

    reviewed: int = Field(ge=0)
    deleted: int = Field(default=0, ge=0)
