from sqlalchemy.orm import Session
from sqlalchemy import select

from staffdirectory.core.config import settings
from staffdirectory.db.models.file import File, FileReference


class AttachmentResolver:
    """Resolves the public path of the image attached to a person record."""

    def resolve_image(self, owner_id: int) -> str | None:
        raise NotImplementedError


class FileReferenceResolver(AttachmentResolver):
    """Looks the image up through sys_file / sys_file_reference.

    When several references match, the one with the lowest
    ``sorting_foreign`` (then reference uid) wins.
    """

    def __init__(
        self,
        db: Session,
        prefix: str | None = None,
        tablename: str | None = None,
        fieldname: str | None = None,
    ):
        self.db = db
        self.prefix = settings.FILEADMIN_PREFIX if prefix is None else prefix
        self.tablename = tablename or settings.FILE_REFERENCE_TABLE
        self.fieldname = fieldname or settings.FILE_REFERENCE_FIELD

    def resolve_image(self, owner_id: int) -> str | None:
        stmt = (
            select(File.identifier)
            .join(FileReference, FileReference.uid_local == File.uid)
            .where(
                FileReference.tablenames == self.tablename,
                FileReference.fieldname == self.fieldname,
                FileReference.uid_foreign == owner_id,
                FileReference.deleted == 0,
                FileReference.hidden == 0,
            )
            .order_by(
                FileReference.sorting_foreign.asc(),
                FileReference.uid.asc(),
            )
            .limit(1)
        )

        identifier = self.db.execute(stmt).scalars().first()
        if not identifier:
            return None
        return self.prefix + identifier
