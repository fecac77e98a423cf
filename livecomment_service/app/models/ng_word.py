from sqlalchemy import Column, BigInteger, String, ForeignKey, Index
from .base import Base, BigIntId


class NGWord(Base):
    __tablename__ = 'ng_words'
    id = Column(BigIntId, primary_key=True, autoincrement=True)
    user_id = Column(BigInteger, ForeignKey('users.id'), nullable=False)
    livestream_id = Column(BigInteger, ForeignKey('livestreams.id'), nullable=False)
    word = Column(String(255), nullable=False)
    created_at = Column(BigInteger, nullable=False)

    __table_args__ = (
        Index('ng_words_user_id_livestream_id_created_at', 'user_id', 'livestream_id', 'created_at'),
    )
