from decimal import Decimal

from sqlalchemy import String, Integer, ForeignKey, Numeric, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from db.models.company import Company


class Job(Base):
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary"),
        CheckConstraint("equity <= 1.0", name="ck_jobs_equity"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    salary: Mapped[int | None] = mapped_column(Integer)
    equity: Mapped[Decimal | None] = mapped_column(Numeric(4, 3))
    company_handle: Mapped[str] = mapped_column(
        String(25), ForeignKey("companies.handle", ondelete="CASCADE"), nullable=False, index=True
    )

    company: Mapped["Company"] = relationship(back_populates="jobs")
