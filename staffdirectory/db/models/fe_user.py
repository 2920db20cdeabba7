from sqlalchemy import Column, Integer, SmallInteger, String, Text

from staffdirectory.db.base import Base


class FrontendUser(Base):
    __tablename__ = "fe_users"

    uid = Column(Integer, primary_key=True, index=True)

    username = Column(String(255), nullable=False, default="")
    name = Column(String(160), nullable=False, default="")
    first_name = Column(String(50), nullable=False, default="")
    last_name = Column(String(50), nullable=False, default="")
    title = Column(String(40), nullable=False, default="")

    address = Column(String(255), nullable=False, default="")
    zip = Column(String(10), nullable=False, default="")
    city = Column(String(50), nullable=False, default="")
    country = Column(String(40), nullable=False, default="")

    telephone = Column(String(30), nullable=False, default="")
    fax = Column(String(30), nullable=False, default="")
    email = Column(String(255), nullable=False, default="")
    www = Column(String(80), nullable=False, default="")

    # number of attached sys_file_reference rows
    image = Column(Text, nullable=True)

    tx_staffdirectory_gender = Column(SmallInteger, nullable=False, default=0)
    tx_staffdirectory_mobilephone = Column(String(30), nullable=False, default="")
    tx_staffdirectory_email2 = Column(String(255), nullable=False, default="")

    deleted = Column(SmallInteger, nullable=False, default=0)
    disable = Column(SmallInteger, nullable=False, default=0)
