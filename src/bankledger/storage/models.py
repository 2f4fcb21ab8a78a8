"""SQLAlchemy models for the SQLite ledger store."""

from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    Numeric,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Account(Base):
    """Account model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, autoincrement=False)
    owner = Column(String, nullable=False)
    balance = Column(Numeric(14, 2), nullable=False)
    # Insertion order into the ledger
    position = Column(Integer, nullable=False)

    transactions = relationship(
        "Transaction",
        back_populates="account",
        cascade="all, delete-orphan",
        order_by="Transaction.sequence",
    )


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    sequence = Column(Integer, nullable=False)
    timestamp = Column(String(19), nullable=False)
    kind = Column(String(16), nullable=False)
    amount = Column(Numeric(14, 2), nullable=False)

    __table_args__ = (UniqueConstraint("account_id", "sequence", name="uq_account_sequence"),)

    account = relationship("Account", back_populates="transactions")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
