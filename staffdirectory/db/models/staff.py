from sqlalchemy import Column, Integer, SmallInteger, String, Text
from sqlalchemy.orm import relationship

from staffdirectory.db.base import Base


class Staff(Base):
    __tablename__ = "tx_staffdirectory_staffs"

    uid = Column(Integer, primary_key=True, index=True)

    staff_name = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=True)

    deleted = Column(SmallInteger, nullable=False, default=0)
    hidden = Column(SmallInteger, nullable=False, default=0)

    departments = relationship("Department", back_populates="staff_record")
