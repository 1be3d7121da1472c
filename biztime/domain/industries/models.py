from sqlalchemy.orm import mapped_column, Mapped
from sqlalchemy import Text
from biztime.core.database import Base


class Industry(Base):
    __tablename__ = "industries"

    code: Mapped[str] = mapped_column(Text, primary_key=True)
    industry: Mapped[str] = mapped_column(Text, nullable=False)
