from sqlalchemy import Column, ForeignKey, Integer, SmallInteger, String

from staffdirectory.db.base import Base


class File(Base):
    __tablename__ = "sys_file"

    uid = Column(Integer, primary_key=True, index=True)

    identifier = Column(String(768), nullable=False, default="")
    name = Column(String(255), nullable=False, default="")


class FileReference(Base):
    __tablename__ = "sys_file_reference"

    uid = Column(Integer, primary_key=True, index=True)

    uid_local = Column(
        Integer,
        ForeignKey("sys_file.uid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    uid_foreign = Column(Integer, nullable=False, default=0, index=True)
    tablenames = Column(String(64), nullable=False, default="")
    fieldname = Column(String(64), nullable=False, default="")
    sorting_foreign = Column(Integer, nullable=False, default=0)

    deleted = Column(SmallInteger, nullable=False, default=0)
    hidden = Column(SmallInteger, nullable=False, default=0)
