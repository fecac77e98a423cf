from sqlalchemy import Column, BigInteger, String, ForeignKey, Index
from .base import Base, BigIntId


class Livecomment(Base):
    __tablename__ = 'livecomments'
    id = Column(BigIntId, primary_key=True, autoincrement=True)
    user_id = Column(BigInteger, ForeignKey('users.id'), nullable=False)
    livestream_id = Column(BigInteger, ForeignKey('livestreams.id'), nullable=False)
    comment = Column(String(255), nullable=False)
    tip = Column(BigInteger, nullable=False, default=0)
    created_at = Column(BigInteger, nullable=False)

    __table_args__ = (
        Index('livecomments_livestream_id_created_at', 'livestream_id', 'created_at'),
    )


class LivecommentReport(Base):
    __tablename__ = 'livecomment_reports'
    id = Column(BigIntId, primary_key=True, autoincrement=True)
    user_id = Column(BigInteger, ForeignKey('users.id'), nullable=False)
    livestream_id = Column(BigInteger, ForeignKey('livestreams.id'), nullable=False, index=True)
    livecomment_id = Column(BigInteger, nullable=False)
    created_at = Column(BigInteger, nullable=False)
