from sqlalchemy import Column, ForeignKey, Integer, SmallInteger, String, Text
from sqlalchemy.orm import relationship

from staffdirectory.db.base import Base


class Department(Base):
    __tablename__ = "tx_staffdirectory_departments"

    uid = Column(Integer, primary_key=True, index=True)

    staff = Column(
        Integer,
        ForeignKey("tx_staffdirectory_staffs.uid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    position_title = Column(String(255), nullable=False, default="")
    position_description = Column(Text, nullable=True)
    sorting = Column(Integer, nullable=False, default=0)

    deleted = Column(SmallInteger, nullable=False, default=0)
    hidden = Column(SmallInteger, nullable=False, default=0)

    staff_record = relationship("Staff", back_populates="departments")
