from sqlalchemy import Column, BigInteger, String, Text, ForeignKey
from .base import Base, BigIntId


class Livestream(Base):
    __tablename__ = 'livestreams'
    id = Column(BigIntId, primary_key=True, autoincrement=True)
    user_id = Column(BigInteger, ForeignKey('users.id'), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    playlist_url = Column(String(255), nullable=False)
    thumbnail_url = Column(String(255), nullable=False)
    start_at = Column(BigInteger, nullable=False)
    end_at = Column(BigInteger, nullable=False)


class Tag(Base):
    __tablename__ = 'tags'
    id = Column(BigIntId, primary_key=True, autoincrement=True)
    name = Column(String(255), unique=True, nullable=False)


class LivestreamTag(Base):
    __tablename__ = 'livestream_tags'
    id = Column(BigIntId, primary_key=True, autoincrement=True)
    livestream_id = Column(BigInteger, ForeignKey('livestreams.id'), nullable=False, index=True)
    tag_id = Column(BigInteger, ForeignKey('tags.id'), nullable=False)
