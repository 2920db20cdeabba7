from sqlalchemy import Column, ForeignKey, Integer, SmallInteger, String
from sqlalchemy.orm import relationship

from staffdirectory.db.base import Base


class Member(Base):
    __tablename__ = "tx_staffdirectory_members"

    uid = Column(Integer, primary_key=True, index=True)

    department = Column(
        Integer,
        ForeignKey("tx_staffdirectory_departments.uid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    feuser_id = Column(
        Integer,
        ForeignKey("fe_users.uid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    position_function = Column(String(255), nullable=False, default="")
    sorting = Column(Integer, nullable=False, default=0)

    deleted = Column(SmallInteger, nullable=False, default=0)
    hidden = Column(SmallInteger, nullable=False, default=0)

    person = relationship("FrontendUser")
